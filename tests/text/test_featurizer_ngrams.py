from textreg.config.text_config import TextConfig
from textreg.text.featurizer import TextFeaturizer


def test_ngram_featurizer():
    docs = [
        "equal protection of law",
        "equal protection clause",
        "commerce clause of the constitution",
    ]
    fitted = TextFeaturizer(
        TextConfig(ngram_range=(1, 2), stopwords="english", weighting="tf")
    ).fit(docs)

    assert "equal protection" in fitted.vocabulary
    # "of" is dropped before bigrams are formed
    assert "protection law" in fitted.vocabulary
    assert "of" not in fitted.vocabulary
    assert fitted.apply("equal protection")[fitted.vocabulary.index_of("equal protection")] == 1

"""Text module: tokenizer → vocabulary → encoder."""

from .tokenizer import Tokenizer, tokenize
from .stopwords import resolve_stopwords
from .vocabulary import Vocabulary, build_vocabulary
from .encoder import encode, encode_many
from .featurizer import TextFeaturizer, FittedFeaturizer

__all__ = [
    "Tokenizer",
    "tokenize",
    "resolve_stopwords",
    "Vocabulary",
    "build_vocabulary",
    "encode",
    "encode_many",
    "TextFeaturizer",
    "FittedFeaturizer",
]

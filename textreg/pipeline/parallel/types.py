# textreg/pipeline/parallel/types.py
from enum import Enum


class ParallelKind(str, Enum):
    DOCUMENT = "document"   # per-document encoding
    CELL = "cell"           # per (fold, penalty) fit-and-evaluate

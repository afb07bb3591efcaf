"""
Text normalization and tokenization used to prepare entity fields and queries.
"""
from .preprocessor import (
    PreProcessor,
    ChainedRuleBasedPreProcessor,
    EnPreProcessor,
    EnPlacesPreProcessor,
)
from .tokenizer import Interval, Token, Tokenizer, SplittingTokenizer, WhitespaceTokenizer

__all__ = [
    "PreProcessor",
    "ChainedRuleBasedPreProcessor",
    "EnPreProcessor",
    "EnPlacesPreProcessor",
    "Interval",
    "Token",
    "Tokenizer",
    "SplittingTokenizer",
    "WhitespaceTokenizer",
]

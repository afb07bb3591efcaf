"""
Windowed phrase variants of entity fields.

Users rarely say a full name or a full address. Each field is expanded into
the windows anchored at its beginning and at its end, so that "andrew" and
"smith" both reach the target "andrew smith", and a place is reachable from
its name, its address, or the name followed by the start of the address.
"""
from typing import Any, List, Optional

from ..models import Target
from ..nlp.tokenizer import Tokenizer, WhitespaceTokenizer


class WindowGenerator:
    """
    Builds the indexed Targets of one entity field.

    :param tokenizer: Splits fields into words, WhitespaceTokenizer if None
    """

    def __init__(self, tokenizer: Optional[Tokenizer] = None):
        self.tokenizer = tokenizer if tokenizer is not None else WhitespaceTokenizer()

    def single_field(self, value: Any, index: int, phrase: str) -> List[Target]:
        """
        Prefix and suffix windows of a single field.

        A field of n tokens yields 2n - 1 variants: the n prefixes ending at
        each token and the n - 1 proper suffixes starting at the next one.

        :param value: Entity the variants point to
        :param index: Index of the entity, shared by its variants
        :param phrase: Preprocessed field
        :return: Variants in generation order, possibly with duplicates
        """
        tokens = self.tokenizer.tokenize(phrase)
        variations = []

        for idx, token in enumerate(tokens):
            variations.append(Target(value, phrase[:token.interval.last], index))
            split = idx + 1
            if split < len(tokens):
                variations.append(Target(value, phrase[tokens[split].interval.first:], index))

        return variations

    def name_and_address(
        self,
        value: Any,
        index: int,
        name: str,
        address: Optional[str] = None,
    ) -> List[Target]:
        """
        Windows of a name followed by an address.

        The name gets its prefixes and suffixes, every name suffix is also
        followed by the full address. The address gets its prefixes, each
        also preceded by the full name, and its suffixes.

        :param value: Entity the variants point to
        :param index: Index of the entity, shared by its variants
        :param name: Preprocessed name, may be empty
        :param address: Preprocessed address, may be empty or None
        :return: Variants in generation order, possibly with duplicates
        """
        name_tokens = self.tokenizer.tokenize(name) if name else []
        address_tokens = self.tokenizer.tokenize(address) if address else []
        variations = []

        for idx, token in enumerate(name_tokens):
            variations.append(Target(value, name[:token.interval.last], index))
            split = idx + 1
            if split < len(name_tokens):
                suffix = name[name_tokens[split].interval.first:]
                variations.append(Target(value, suffix, index))
                if address:
                    variations.append(Target(value, f"{suffix} {address}", index))

        for idx, token in enumerate(address_tokens):
            prefix = address[:token.interval.last]
            variations.append(Target(value, prefix, index))
            if name:
                variations.append(Target(value, f"{name} {prefix}", index))
            split = idx + 1
            if split < len(address_tokens):
                variations.append(Target(value, address[address_tokens[split].interval.first:], index))

        return variations

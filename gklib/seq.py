"""Protein sequence profiles and symbol alphabets."""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from gklib.tokenizer import tokenize

AMINO_ACID_ORDER = "ARNDCQEGHILKMFPSTWYVBZX*"
PSSM_WIDTH = 20

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Alphabet:
    """A two-way mapping between symbols and their positions."""

    def __init__(self, symbols: str) -> None:
        self.symbols = symbols
        self._c2i = {ch: i for i, ch in enumerate(symbols)}

    def __len__(self) -> int:
        return len(self.symbols)

    def index(self, ch: str) -> int:
        """Return the position of ``ch``; a repeated symbol maps to its last position."""
        return self._c2i[ch]

    def symbol(self, i: int) -> str:
        """Return the symbol at position ``i``."""
        if not 0 <= i < len(self.symbols):
            raise IndexError(f"symbol index {i} out of range")
        return self.symbols[i]


@dataclass
class Sequence:
    """A sequence with its position-specific scoring and frequency matrices."""

    name: str
    sequence: list[int] = field(default_factory=list)
    pssm: list[list[int]] = field(default_factory=list)
    psfm: list[list[int]] = field(default_factory=list)
    nsymbols: int = PSSM_WIDTH

    def __len__(self) -> int:
        return len(self.sequence)


def _atoi(token: str) -> int:
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else 0


def read_gkmod_pssm(path: Union[str, Path]) -> Sequence:
    """Read a profile in gkmod PSSM format.

    The first line lists the 20 column residues; each following line holds a
    position number, the residue, 20 PSSM scores and 20 PSFM values.
    """
    path = Path(path)
    converter = Alphabet(AMINO_ACID_ORDER)
    lines = path.read_text().splitlines()
    if not lines:
        raise ValueError(f"Unexpected end of file: {path}")

    header_tokens = tokenize(lines[0].upper(), " \t\n")
    if len(header_tokens) < PSSM_WIDTH:
        raise ValueError(f"Header of {path} has fewer than {PSSM_WIDTH} columns")
    columns = []
    for token in header_tokens[:PSSM_WIDTH]:
        column = converter._c2i.get(token[0])
        if column is None or column >= PSSM_WIDTH:
            raise ValueError(f"Unknown header residue {token[0]!r} in {path}")
        columns.append(column)

    seq = Sequence(name=path.stem)
    for lineno, line in enumerate(lines[1:], start=2):
        tokens = tokenize(line.upper(), " \t\n")
        if len(tokens) < 2 + 2 * PSSM_WIDTH:
            raise ValueError(f"Line {lineno} of {path} has too few fields")
        residue = tokens[1][0]
        try:
            seq.sequence.append(converter.index(residue))
        except KeyError:
            raise ValueError(f"Unknown residue {residue!r} on line {lineno} of {path}") from None
        pssm_row = [0] * PSSM_WIDTH
        psfm_row = [0] * PSSM_WIDTH
        for j, column in enumerate(columns):
            pssm_row[column] = _atoi(tokens[2 + j])
            psfm_row[column] = _atoi(tokens[2 + PSSM_WIDTH + j])
        seq.pssm.append(pssm_row)
        seq.psfm.append(psfm_row)
    return seq
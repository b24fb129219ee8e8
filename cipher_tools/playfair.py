# playfair.py
import logging, re, sys
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)

SIZE = 5
AZ25 = "ABCDEFGHIKLMNOPQRSTUVWXYZ"  # J merged to I
PAIR_FILLER = "X"  # splits a doubled letter inside a pair
PAD_FILLER = "Z"   # pads an odd trailing letter

Square = Tuple[Tuple[str, ...], ...]
Position = Tuple[int, int]


class PlayfairError(ValueError):
    """Base class for everything the Playfair core refuses to process."""


class EmptyKeyError(PlayfairError):
    def __init__(self, message: str = "Key must contain at least one letter."):
        super().__init__(message)


class EmptyTextError(PlayfairError):
    def __init__(self, message: str = "Text must contain at least one letter."):
        super().__init__(message)


def _require_str(value, what: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a str, not {type(value).__name__}")
    return value


# -----------------------
# Alphabet
# -----------------------

def norm(s: str) -> str:
    """Uppercase, drop anything that isn't A-Z, and fold J into I."""
    return re.sub(r"[^A-Za-z]", "", s).upper().replace("J", "I")


# -----------------------
# Key square
# -----------------------

def square_letters(key: str) -> str:
    """
    The 25-letter row-major form of the key square.

    Key letters come first in order of first appearance, followed by the
    rest of AZ25 in alphabetical order. Raises EmptyKeyError when the key
    has no letters at all.
    """
    letters = norm(_require_str(key, "key"))
    if not letters:
        raise EmptyKeyError()

    seen = dict.fromkeys(letters)  # keeps first-occurrence order
    for ch in AZ25:
        seen.setdefault(ch)
    sq = "".join(seen)

    assert len(sq) == SIZE * SIZE, sq
    return sq


def build_key_square(key: str) -> Square:
    sq = square_letters(key)
    square = tuple(tuple(sq[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE))
    logger.debug("key square built: %s", sq)
    return square


def pretty_square(square: Square) -> str:
    return "\n".join(" ".join(row) for row in square)


# -----------------------
# Position lookup
# -----------------------

def index_square(square: Square) -> Dict[str, Position]:
    """letter -> (row, col) for every cell; J resolves to I's cell."""
    pos = {ch: (r, c) for r, row in enumerate(square) for c, ch in enumerate(row)}
    pos["J"] = pos["I"]
    return pos


def position(square: Square, letter: str) -> Position:
    letter = "I" if letter == "J" else letter
    for r, row in enumerate(square):
        if letter in row:
            return r, row.index(letter)
    # every AZ25 letter is placed by build_key_square
    raise AssertionError(f"{letter!r} is not in the key square")


# -----------------------
# Digraphs
# -----------------------

def digraphs(letters: str) -> List[str]:
    """
    Split normalized letters into pairs for encryption.

    A doubled letter inside a pair becomes (letter, X) and the second copy
    is looked at again on the next step; a lone trailing letter gets a Z.
    """
    pairs = []
    i = 0
    while i < len(letters):
        first = letters[i]
        if i + 1 < len(letters):
            second = letters[i + 1]
            if first == second:
                pairs.append(first + PAIR_FILLER)
                i += 1
            else:
                pairs.append(first + second)
                i += 2
        else:
            pairs.append(first + PAD_FILLER)
            i += 1
    return pairs


def prepare_text(text: str) -> str:
    return "".join(digraphs(norm(_require_str(text, "text"))))


def _cipher_pairs(letters: str) -> List[str]:
    # ciphertext is taken as already paired; only an odd tail is padded
    if len(letters) % 2:
        letters += PAD_FILLER
    return [letters[i:i + 2] for i in range(0, len(letters), 2)]


# -----------------------
# Substitution
# -----------------------

def substitute(square: Square, pair: str, decrypt: bool = False, index: Dict[str, Position] = None) -> str:
    """
    Apply the row / column / rectangle rule to one digraph.

    Rows shift right and columns shift down when encrypting, the other way
    when decrypting (both wrap). The rectangle swap is its own inverse.
    """
    if index is None:
        index = index_square(square)
    step = -1 if decrypt else 1

    ra, ca = index[pair[0]]
    rb, cb = index[pair[1]]

    if ra == rb:  # same row
        return square[ra][(ca + step) % SIZE] + square[rb][(cb + step) % SIZE]
    if ca == cb:  # same column
        return square[(ra + step) % SIZE][ca] + square[(rb + step) % SIZE][cb]
    return square[ra][cb] + square[rb][ca]


# -----------------------
# Cipher
# -----------------------

class PlayfairCipher:
    """A key square built once and reused for any number of messages."""

    def __init__(self, key: str):
        self._square = build_key_square(key)
        self._index = index_square(self._square)

    @property
    def square(self) -> Square:
        return self._square

    def _run(self, pairs: List[str], decrypt: bool) -> str:
        logger.debug("%s %d digraph(s)", "decrypting" if decrypt else "encrypting", len(pairs))
        return "".join(substitute(self._square, p, decrypt, self._index) for p in pairs)

    def encrypt(self, plaintext: str) -> str:
        pairs = digraphs(norm(_require_str(plaintext, "text")))
        if not pairs:
            raise EmptyTextError()
        return self._run(pairs, decrypt=False)

    def decrypt(self, ciphertext: str) -> str:
        letters = norm(_require_str(ciphertext, "text"))
        if not letters:
            raise EmptyTextError()
        return self._run(_cipher_pairs(letters), decrypt=True)

    def key_square_string(self) -> str:
        return pretty_square(self._square)


def encrypt(key: str, plaintext: str) -> str:
    return PlayfairCipher(key).encrypt(plaintext)


def decrypt(key: str, ciphertext: str) -> str:
    return PlayfairCipher(key).decrypt(ciphertext)


def key_square(key: str) -> List[List[str]]:
    """The key square as 5 lists of 5 letters, ready for display or JSON."""
    return [list(row) for row in build_key_square(key)]


def main() -> int:
    from helpers import configure_logging, default_key

    configure_logging()

    mode = input("encrypt or decrypt? [e/d]: ").strip().lower()
    key = input("enter key: ").strip() or default_key()
    message = input("enter message: ").strip()

    try:
        cipher = PlayfairCipher(key)
        result = cipher.decrypt(message) if mode.startswith("d") else cipher.encrypt(message)
    except PlayfairError as e:
        print("Error:", e)
        return 1

    print("\nKEY SQUARE:\n" + cipher.key_square_string())
    print("\nRESULT:\n" + result)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
cipher_tools — classic Playfair cipher
======================================
5x5 key square (I and J share a cell), digraph encryption and decryption.
"""

from .playfair import (
    PlayfairCipher,
    PlayfairError,
    EmptyKeyError,
    EmptyTextError,
    encrypt,
    decrypt,
    key_square,
)

__all__ = [
    "PlayfairCipher",
    "PlayfairError",
    "EmptyKeyError",
    "EmptyTextError",
    "encrypt",
    "decrypt",
    "key_square",
]

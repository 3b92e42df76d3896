from .alphabet import ALPHABET, InvalidKeyError, MalformedCiphertextError
from .digraph import CipherMatrix, DigraphCipher, build_matrix, digraph_decrypt, digraph_encrypt, prepare_digraphs
from .engine import CIPHERS, MODES, CipherRequest, transform
from .running_key import RunningKeyCipher, running_key_decrypt, running_key_encrypt
from .shift import DEFAULT_SHIFT, ShiftCipher, shift_decrypt, shift_encrypt

__all__ = [
    "ALPHABET",
    "CIPHERS",
    "MODES",
    "DEFAULT_SHIFT",
    "InvalidKeyError",
    "MalformedCiphertextError",
    "ShiftCipher",
    "RunningKeyCipher",
    "DigraphCipher",
    "CipherMatrix",
    "CipherRequest",
    "build_matrix",
    "prepare_digraphs",
    "shift_encrypt",
    "shift_decrypt",
    "running_key_encrypt",
    "running_key_decrypt",
    "digraph_encrypt",
    "digraph_decrypt",
    "transform",
]

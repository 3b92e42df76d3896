import unittest

import classic_ciphers
from classic_ciphers.alphabet import InvalidKeyError
from classic_ciphers.engine import CIPHERS, MODES, CipherRequest, transform


class TransformTest(unittest.TestCase):
    def test_dispatches_every_cipher_and_mode(self):
        self.assertEqual(transform("shift", "encrypt", "ABC", 1), "BCD")
        self.assertEqual(transform("shift", "decrypt", "BCD", 1), "ABC")
        self.assertEqual(transform("running-key", "encrypt", "attackatdawn", "lemon"), "lxfopvefrnhr")
        self.assertEqual(transform("running-key", "decrypt", "lxfopvefrnhr", "lemon"), "attackatdawn")
        self.assertEqual(transform("digraph", "encrypt", "HELLO", "MONARCHY"), "CFSUPM")
        self.assertEqual(transform("digraph", "decrypt", "CFSUPM", "MONARCHY"), "HELXLO")

    def test_unknown_cipher_or_mode(self):
        with self.assertRaises(ValueError):
            transform("enigma", "encrypt", "text", "key")
        with self.assertRaises(ValueError):
            transform("shift", "hash", "text", 1)

    def test_invalid_key_surfaces_to_caller(self):
        for cipher in ("running-key", "digraph"):
            for mode in MODES:
                with self.subTest(cipher=cipher, mode=mode):
                    with self.assertRaises(InvalidKeyError):
                        transform(cipher, mode, "text", "")

    def test_request_object(self):
        request = CipherRequest(cipher="shift", mode="encrypt", text="xyz", key=2)
        self.assertEqual(request.run(), "zab")

    def test_constants(self):
        self.assertEqual(CIPHERS, ("shift", "running-key", "digraph"))
        self.assertEqual(MODES, ("encrypt", "decrypt"))

    def test_package_exports(self):
        self.assertEqual(classic_ciphers.transform("shift", "encrypt", "A1B!", 1), "B1C!")
        self.assertEqual(classic_ciphers.digraph_encrypt("HELLO", "MONARCHY"), "CFSUPM")
        self.assertTrue(issubclass(classic_ciphers.InvalidKeyError, ValueError))
        self.assertTrue(issubclass(classic_ciphers.MalformedCiphertextError, ValueError))


if __name__ == "__main__":
    unittest.main()

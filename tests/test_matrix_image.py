import tempfile
import unittest
from pathlib import Path

from PIL import Image

from classic_ciphers.alphabet import InvalidKeyError
from classic_ciphers.matrix_image import KEY_FILL, render_matrix


class RenderMatrixTest(unittest.TestCase):
    def test_writes_png_of_expected_size(self):
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "matrix.png"
            info = render_matrix("MONARCHY", out, cell=40)

            self.assertTrue(out.exists())
            self.assertEqual((info.width, info.height), (200, 200))
            self.assertEqual(info.letters, "MONARCHYBDEFGIKLPQSTUVWXZ")

            with Image.open(out) as img:
                self.assertEqual(img.format, "PNG")
                self.assertEqual(img.size, (200, 200))
                # верхня ліва клітинка (M) з ключа, нижня права (Z) ні
                self.assertEqual(img.convert("RGB").getpixel((3, 3)), KEY_FILL)
                self.assertEqual(img.convert("RGB").getpixel((196, 196)), (255, 255, 255))

    def test_rejects_small_cell(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ValueError):
                render_matrix("KEY", Path(tmp) / "m.png", cell=2)

    def test_rejects_invalid_key(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(InvalidKeyError):
                render_matrix("123", Path(tmp) / "m.png")


if __name__ == "__main__":
    unittest.main()

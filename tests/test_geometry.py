from PIL import Image

from pixel_transforms.processing.geometry import horizontal, vertical

A = (255, 0, 0, 255)
B = (0, 255, 0, 128)
C = (0, 0, 255, 0)


def _sample(width: int, height: int) -> Image.Image:
    img = Image.new("RGBA", (width, height))
    img.putdata([((i * 37) % 256, (i * 11) % 256, (i * 5) % 256, 255 - i) for i in range(width * height)])
    return img


def test_horizontal_reverses_a_row():
    src = Image.new("RGBA", (3, 1))
    src.putdata([A, B, C])

    assert list(horizontal(src).getdata()) == [C, B, A]


def test_vertical_reverses_a_column():
    src = Image.new("RGBA", (1, 3))
    src.putdata([A, B, C])

    assert list(vertical(src).getdata()) == [C, B, A]


def test_horizontal_maps_every_column():
    src = _sample(5, 4)
    out = horizontal(src)

    for y in range(4):
        for x in range(5):
            assert out.getpixel((x, y)) == src.getpixel((4 - x, y))


def test_vertical_maps_every_row():
    src = _sample(4, 5)
    out = vertical(src)

    for y in range(5):
        for x in range(4):
            assert out.getpixel((x, y)) == src.getpixel((x, 4 - y))


def test_mirrors_are_involutions():
    for width, height in ((1, 1), (4, 3), (5, 6)):
        src = _sample(width, height)

        assert list(horizontal(horizontal(src)).getdata()) == list(src.getdata())
        assert list(vertical(vertical(src)).getdata()) == list(src.getdata())


def test_mirrors_preserve_size_and_source():
    src = _sample(7, 2)
    before = list(src.getdata())

    assert horizontal(src).size == (7, 2)
    assert vertical(src).size == (7, 2)
    assert list(src.getdata()) == before

import pytest
from PIL import Image

from fivednine.render.texture import (
    ImageData,
    TextureStorage,
    is_power_of_two,
    load_image_data,
)


class FakeUploader:
    def __init__(self):
        self.uploaded = []

    def upload(self, image_data):
        self.uploaded.append(image_data)
        return len(self.uploaded) + 100


@pytest.mark.parametrize(
    "value, expected",
    [(1, True), (2, True), (64, True), (0, False), (-4, False), (600, False), (900, False)],
)
def test_is_power_of_two(value, expected):
    assert is_power_of_two(value) is expected


def test_load_rgba_image(tmp_path):
    path = tmp_path / "card.png"
    image = Image.new("RGBA", (4, 2), (10, 20, 30, 40))
    image.save(path)
    data = load_image_data(path)
    assert (data.width, data.height, data.depth) == (4, 2, 4)
    assert data.pixels == image.tobytes()


def test_load_rgb_image(tmp_path):
    path = tmp_path / "card.png"
    Image.new("RGB", (3, 5), (1, 2, 3)).save(path)
    data = load_image_data(path)
    assert data.depth == 3
    assert len(data.pixels) == 3 * 5 * 3
    assert data.pixels[:3] == bytes([1, 2, 3])


def test_load_grayscale_becomes_rgb(tmp_path):
    path = tmp_path / "gray.png"
    Image.new("L", (2, 2), 128).save(path)
    data = load_image_data(path)
    assert data.depth == 3
    assert data.pixels[:3] == bytes([128, 128, 128])


def test_load_non_image_raises(tmp_path):
    path = tmp_path / "notes.png"
    path.write_text("not an image")
    with pytest.raises(OSError):
        load_image_data(path)


def test_add_and_find_texture():
    uploader = FakeUploader()
    storage = TextureStorage(uploader)
    image = ImageData(2, 4, 4, bytes(32))
    texture = storage.add_texture(image, "game_600x900")
    assert storage.find_texture_by_name("game_600x900") is texture
    assert texture.handle == 101
    assert (texture.width, texture.height, texture.channels) == (2, 4, 4)
    assert uploader.uploaded == [image]


def test_find_missing_texture():
    storage = TextureStorage(FakeUploader())
    assert storage.find_texture_by_name("absent") is None


def test_duplicate_texture_rejected_without_upload():
    uploader = FakeUploader()
    storage = TextureStorage(uploader)
    image = ImageData(1, 1, 3, bytes(3))
    first = storage.add_texture(image, "dup")
    with pytest.raises(ValueError):
        storage.add_texture(image, "dup")
    assert len(uploader.uploaded) == 1
    assert storage.find_texture_by_name("dup") is first


def test_non_power_of_two_still_added():
    storage = TextureStorage(FakeUploader())
    texture = storage.add_texture(ImageData(600, 900, 3, b""), "odd")
    assert storage.find_texture_by_name("odd") is texture


def test_add_from_image_path(tmp_path):
    path = tmp_path / "logo.png"
    Image.new("RGBA", (8, 8), (0, 0, 0, 255)).save(path)
    uploader = FakeUploader()
    storage = TextureStorage(uploader)
    texture = storage.add_texture_from_image_path(path, "logo")
    assert texture.name == "logo"
    assert uploader.uploaded[0].depth == 4
    assert uploader.uploaded[0].width == 8
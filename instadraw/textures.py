"""Loading images into GL textures."""

from __future__ import annotations

import io
from typing import NamedTuple

from PIL import Image, UnidentifiedImageError


class DecodedImage(NamedTuple):
    width: int
    height: int
    pixels: bytes


def decode_rgba(data: bytes) -> DecodedImage:
    """Decode an encoded image into tightly packed 8-bit RGBA rows."""
    try:
        with Image.open(io.BytesIO(data)) as image:
            rgba = image.convert("RGBA")
    except (UnidentifiedImageError, OSError) as exc:
        raise ValueError(f"cannot decode image: {exc}") from exc
    return DecodedImage(rgba.width, rgba.height, rgba.tobytes())


class Textures:
    """The texture objects used by the renderer: sprites and font are loaded."""

    def __init__(self, sprites_image: bytes, font_image: bytes) -> None:
        from pyglet import gl

        self._gl = gl
        self.tex_sprites = self._generate()
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.tex_sprites)
        gl.glActiveTexture(gl.GL_TEXTURE0)
        self._upload(self.tex_sprites, sprites_image)

        self.tex_blocks = self._generate()
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.tex_blocks)

        self.tex_font = self._generate()
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.tex_font)
        gl.glActiveTexture(gl.GL_TEXTURE1)
        self._upload(self.tex_font, font_image)

        self.tex_world = self._generate()
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.tex_world)

        self.tex_shadow = self._generate()
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.tex_shadow)

        print(
            f"Textures:\n- Sprites: {self.tex_sprites}\n"
            f"- Blocks: {self.tex_blocks}\n- Font: {self.tex_font}"
        )
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.tex_sprites)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.tex_font)

    def _generate(self) -> int:
        names = (self._gl.GLuint * 1)()
        self._gl.glGenTextures(1, names)
        return names[0]

    def _upload(self, texture_id: int, data: bytes) -> None:
        gl = self._gl
        image = decode_rgba(data)
        pixels = (gl.GLubyte * len(image.pixels)).from_buffer_copy(image.pixels)

        gl.glBindTexture(gl.GL_TEXTURE_2D, texture_id)
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D,
            0,
            gl.GL_RGBA,
            image.width,
            image.height,
            0,
            gl.GL_RGBA,
            gl.GL_UNSIGNED_BYTE,
            pixels,
        )
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_NEAREST)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_NEAREST)
        for wrap in (gl.GL_TEXTURE_WRAP_S, gl.GL_TEXTURE_WRAP_T, gl.GL_TEXTURE_WRAP_R):
            gl.glTexParameteri(gl.GL_TEXTURE_2D, wrap, gl.GL_CLAMP_TO_BORDER)
        border = (gl.GLfloat * 4)(0.0, 0.0, 0.0, 0.0)
        gl.glTexParameterfv(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_BORDER_COLOR, border)
        gl.glBindTexture(gl.GL_TEXTURE_2D, 0)

    def bind(self) -> None:
        """Bind sprites to texture unit 0 and the font to unit 1."""
        gl = self._gl
        gl.glActiveTexture(gl.GL_TEXTURE0)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.tex_sprites)
        gl.glActiveTexture(gl.GL_TEXTURE1)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.tex_font)
"""Pillow codecs implementing the decoder and encoder ports."""

from __future__ import annotations

import io
from pathlib import Path
from typing import cast

from PIL import Image, UnidentifiedImageError, features

from webp_converter.application.ports import DecodedImage
from webp_converter.errors import DecodeError, DependencyError, EncodeError

WEBP_MODES = frozenset({"RGB", "RGBA"})

# Pillow plugins also signal malformed data with SyntaxError and EOFError.
_DECODE_ERRORS = (
    UnidentifiedImageError,
    Image.DecompressionBombError,
    OSError,
    EOFError,
    SyntaxError,
    ValueError,
)


def webp_supported() -> bool:
    """Return whether the installed Pillow can write WebP."""
    return bool(features.check("webp"))


def prepare_for_webp(image: Image.Image) -> Image.Image:
    """Return ``image`` in a mode the WebP encoder accepts.

    Palette, grayscale and CMYK inputs are converted to ``RGBA`` when they
    carry transparency and to ``RGB`` otherwise. The input is returned
    unchanged when no conversion is needed.
    """
    if image.mode in WEBP_MODES:
        return image
    if image.has_transparency_data:
        return image.convert("RGBA")
    return image.convert("RGB")


class PillowImageDecoder:
    """Decode JPEG/PNG/GIF (and anything else Pillow identifies)."""

    def decode(self, data: bytes, source_path: Path) -> DecodedImage:
        """Decode image bytes into a fully loaded Pillow image.

        Parameters
        ----------
        data : bytes
            Raw file content.
        source_path : Path
            Path the bytes were read from, used for error context.

        Returns
        -------
        DecodedImage
            First frame of the image, fully decoded.

        Raises
        ------
        DecodeError
            If the content is not a valid or supported image, or is
            truncated.
        """
        try:
            image = Image.open(io.BytesIO(data))
            # ``open`` is lazy; force decoding so truncation surfaces here.
            image.load()
        except _DECODE_ERRORS as exc:
            raise DecodeError(source_path, str(exc)) from exc
        return DecodedImage(
            pixels=image,
            width=image.width,
            height=image.height,
            mode=image.mode,
            source_format=image.format,
        )


class PillowWebpEncoder:
    """Encode decoded images as WebP using Pillow defaults."""

    def encode(self, image: DecodedImage, output_path: Path) -> bytes:
        """Encode ``image`` to WebP bytes.

        Parameters
        ----------
        image : DecodedImage
            Image produced by :class:`PillowImageDecoder`.
        output_path : Path
            Destination of the bytes, used for error context.

        Returns
        -------
        bytes
            Complete WebP payload.

        Raises
        ------
        DependencyError
            If Pillow was built without WebP support.
        EncodeError
            If the image cannot be encoded.
        """
        if not webp_supported():
            raise DependencyError("Pillow was built without WebP support.")

        pixels = cast(Image.Image, image.pixels)
        buffer = io.BytesIO()
        try:
            prepared = prepare_for_webp(pixels)
            try:
                prepared.save(buffer, format="WEBP")
            finally:
                if prepared is not pixels:
                    prepared.close()
        except (OSError, ValueError, KeyError) as exc:
            raise EncodeError(output_path, str(exc)) from exc
        return buffer.getvalue()

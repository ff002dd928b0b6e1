"""Skin photo decoding, resizing, and normalization."""

import base64
import binascii
import io
import logging
from typing import Union

import torch
from PIL import Image, UnidentifiedImageError
from torchvision import transforms
from torchvision.transforms import InterpolationMode

from core.errors import DecodeError, EmptyInputError
from core.skin_cnn import INPUT_SIZE

logger = logging.getLogger(__name__)

RawImage = Union[str, bytes]


class ImagePreprocessor:
    """Turns an encoded photo into the model's input tensor."""

    def __init__(self, input_size: int = INPUT_SIZE):
        self.input_size = input_size
        self._transform = transforms.Compose([
            transforms.Resize((input_size, input_size), interpolation=InterpolationMode.BILINEAR),
            transforms.PILToTensor(),  # uint8, (3, H, W)
        ])

    @property
    def output_shape(self):
        return (1, self.input_size, self.input_size, 3)

    @staticmethod
    def decode_data_uri(raw_image: RawImage) -> bytes:
        """Extract the encoded image bytes from a data URI or base64 string.

        Raw bytes are passed through untouched.
        """
        if raw_image is None or len(raw_image) == 0:
            raise EmptyInputError("No image data provided")

        if isinstance(raw_image, (bytes, bytearray)):
            return bytes(raw_image)

        payload = raw_image.strip()
        if payload.startswith("data:"):
            header, sep, payload = payload.partition(",")
            if not sep:
                raise DecodeError("Malformed data URI")
            if ";base64" not in header:
                raise DecodeError("Only base64-encoded data URIs are supported")
        if not payload:
            raise EmptyInputError("Data URI carries no image data")

        try:
            return base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecodeError(f"Invalid base64 image data: {e}") from e

    def load_image(self, raw_image: RawImage) -> Image.Image:
        """Decode an encoded photo into an RGB PIL image."""
        data = self.decode_data_uri(raw_image)
        try:
            with io.BytesIO(data) as buf:
                img = Image.open(buf)
                img.load()
                return img.convert("RGB")
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
            raise DecodeError(f"Cannot decode image: {e}") from e

    def normalize(self, raw_image: RawImage) -> torch.Tensor:
        """Preprocess a photo for SkinConditionCNN.

        Returns a float32 tensor of shape (1, 224, 224, 3) with values mapped
        from [0, 255] to [-1, 1]. The caller owns the returned tensor.
        """
        img = self.load_image(raw_image)
        logger.debug("Decoded image %sx%s", img.width, img.height)

        pixels = self._transform(img).permute(1, 2, 0).float()
        tensor = (pixels - 127.5) / 127.5
        return tensor.unsqueeze(0)

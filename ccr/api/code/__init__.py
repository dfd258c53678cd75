"""Code module - forward work to the code program and the image endpoint."""

from .._output_schemas.code import CodeCodeOutput, CodeImageOutput

__all__ = ["CodeCodeOutput", "CodeImageOutput"]

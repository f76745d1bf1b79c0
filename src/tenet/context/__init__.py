from .output_capture import OutputBuffer, capture_output


__all__ = ["OutputBuffer", "capture_output"]

from img_processing.core.utils.mime import detect_mime_type


def test_detect_jpeg() -> None:
    assert detect_mime_type(b"\xff\xd8\xff\xe0abc") == "image/jpeg"


def test_detect_png() -> None:
    assert detect_mime_type(b"\x89PNG\r\n\x1a\nxxx") == "image/png"


def test_detect_gif() -> None:
    assert detect_mime_type(b"GIF89a\x01\x00") == "image/gif"


def test_detect_webp() -> None:
    assert detect_mime_type(b"RIFF\x24\x00\x00\x00WEBPVP8 ") == "image/webp"


def test_riff_without_webp_marker_is_unknown() -> None:
    assert detect_mime_type(b"RIFF\x24\x00\x00\x00WAVEfmt ") is None


def test_detect_avif() -> None:
    assert detect_mime_type(b"\x00\x00\x00\x1cftypavif\x00\x00\x00\x00") == "image/avif"


def test_detect_tiff_both_byte_orders() -> None:
    assert detect_mime_type(b"II*\x00\x08\x00") == "image/tiff"
    assert detect_mime_type(b"MM\x00*\x00\x08") == "image/tiff"


def test_unsupported_type() -> None:
    assert detect_mime_type(b"random-bytes") is None


def test_svg_is_not_sniffed(sample_svg_binary) -> None:
    assert detect_mime_type(sample_svg_binary) is None


def test_empty_content() -> None:
    assert detect_mime_type(b"") is None

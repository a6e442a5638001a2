"""Small in-memory files and request builders shared by the tests."""
from io import BytesIO
import struct
import zlib

from werkzeug.test import EnvironBuilder
from werkzeug.wrappers import Request


def png_bytes(width=4, height=4):
    """Build a valid RGB PNG without any imaging library."""
    def chunk(tag, data):
        crc = zlib.crc32(tag + data) & 0xffffffff
        return struct.pack('>I', len(data)) + tag + data + struct.pack('>I', crc)

    raw = b''.join(b'\x00' + b'\xff\x00\x00' * width for _ in range(height))
    return (
        b'\x89PNG\r\n\x1a\n'
        + chunk(b'IHDR', struct.pack('>IIBBBBB', width, height, 8, 2, 0, 0, 0))
        + chunk(b'IDAT', zlib.compress(raw))
        + chunk(b'IEND', b'')
    )


def jpeg_bytes():
    """JFIF header followed by filler; enough for magic-byte detection."""
    return b'\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00' + b'\x00' * 600 + b'\xff\xd9'


def file_field(content, filename):
    return (BytesIO(content), filename)


def build_request(data=None, **kwargs):
    """Build a werkzeug Request carrying `data` as a POST body."""
    builder = EnvironBuilder(method='POST', data=data, **kwargs)
    try:
        return builder.get_request()
    finally:
        builder.close()


def build_truncated_request(data, keep=0.5):
    """Build a multipart Request whose body stops short of its Content-Length."""
    builder = EnvironBuilder(method='POST', data=data)
    try:
        environ = builder.get_environ()
    finally:
        builder.close()
    body = environ['wsgi.input'].read()
    environ['wsgi.input'] = BytesIO(body[:int(len(body) * keep)])
    return Request(environ)

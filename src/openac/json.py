""" Encoding of individual message fields into channel frames, and back.

    Every field frame starts with a one-byte marker. Byte strings travel
    as-is behind the ``b`` marker, since serialized configuration blobs are
    opaque and must arrive unchanged. Everything else is JSON behind the
    ``j`` marker, using the fastest JSON library available.
"""

msgspec = None
orjson = None
json = None

try:
    import msgspec
except ImportError:
    pass

if msgspec is None:
    try:
        import orjson
    except ImportError:
        pass

if msgspec is None and orjson is None:
    import json


if msgspec is not None:
    dumps = msgspec.json.Encoder().encode
    loads = msgspec.json.Decoder().decode
elif orjson is not None:
    dumps = orjson.dumps
    loads = orjson.loads
else:
    def dumps(value):
        return json.dumps(value).encode()

    loads = json.loads


RAW = b'b'
JSON = b'j'


def encode_field(value):
    """ Return the frame for a single message field *value*.
    """

    if isinstance(value, (bytes, bytearray)):
        return RAW + bytes(value)

    return JSON + dumps(value)



def decode_field(frame):
    """ Return the field value carried by *frame*; the inverse of
        :func:`encode_field`.
    """

    marker = frame[:1]
    body = frame[1:]

    if marker == RAW:
        return bytes(body)

    if marker == JSON:
        return loads(body)

    raise ValueError('unrecognized field marker: ' + repr(marker))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:

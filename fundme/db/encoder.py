import json

# Wei amounts pass 2 ** 63 all the time, so ints outside a signed 64 bit
# range are written as tagged strings and restored on decode.
INT_LIMIT = 2 ** 63


class Encoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, bytes):
            return {'__bytes__': o.hex()}
        return super().default(o)


def tag_big_ints(data):
    if isinstance(data, bool):
        return data
    if isinstance(data, int):
        if -INT_LIMIT < data < INT_LIMIT - 1:
            return data
        return {'__big_int__': str(data)}
    if isinstance(data, dict):
        return {k: tag_big_ints(v) for k, v in data.items()}
    if isinstance(data, (list, tuple)):
        return [tag_big_ints(v) for v in data]
    return data


def untag(obj):
    if '__bytes__' in obj:
        return bytes.fromhex(obj['__bytes__'])
    if '__big_int__' in obj:
        return int(obj['__big_int__'])
    return obj


def encode(data):
    return json.dumps(tag_big_ints(data), cls=Encoder, separators=(',', ':'))


def decode(raw):
    if raw is None:
        return None

    if isinstance(raw, bytes):
        raw = raw.decode()

    try:
        return json.loads(raw, object_hook=untag)
    except json.JSONDecodeError:
        return None


def encode_kv(key, value):
    """Byte sizes used to price a storage access."""
    return key.encode(), encode(value).encode()

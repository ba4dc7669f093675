from .exception import ParseError

def printsafe(s):
    return ''.join(map(lambda c: c if c.isprintable() else '�', s))

def key_to_str(k):
    if isinstance(k, str):
        return printsafe(k)
    return str(k)

KEY_TYPES = {
        'int': int,
        'float': float,
        'str': str,
        }

def parse_key(s, key_type='int'):
    try:
        conv = KEY_TYPES[key_type]
    except KeyError:
        raise ParseError("unknown key type `", key_type, "'")
    try:
        return conv(s)
    except ValueError:
        raise ParseError("invalid ", key_type, " key `", printsafe(s), "'")

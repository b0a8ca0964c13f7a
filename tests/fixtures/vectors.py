"""
Golden vectors.

Flat tree roots were derived once with coreutils (sha256sum over the
0x00/0x01-prefixed byte strings) and pinned here. Node tree roots are
published roots for the plain SHA-256 node tree (no
prefixes).
"""

GREETINGS = [b"Hello", b"Hi", b"Hey", b"Hola"]

# sha256(0x00 || block)
GOLDEN_LEAVES = {
    b"Hello": bytes.fromhex("90b626dbb1e994c962942db2b3b16d97c63f679912a176bb96f4e308c213005b"),
    b"Hi": bytes.fromhex("ceec7297960080e699d4c13ee874d8cefab3b4f93584458c402f3f0d82fdd316"),
    b"Hey": bytes.fromhex("21facd9f3bfb905f3983f0e0f96b3a9d52624bf8e9746b0d5581adb980ccd1b1"),
    b"Hola": bytes.fromhex("269187c16e16a602dd35af3e20bc9101f5aea8e99eacccf69d4213adf76e3738"),
}

# [Hello] -> [Hello, Hello]
GOLDEN_ROOT_1 = bytes.fromhex("2189422131f764fec3db08bb8dd584042022db2bcc29f9c0c043f02794074761")

# [Hello, Hi, Hey] -> [Hello, Hi, Hey, Hey]
GOLDEN_ROOT_3 = bytes.fromhex("19988d4d614b8baec1dfa72bc26b384d3968e18f029055b8f07e118cf3ed8ffd")

# [Hello, Hi, Hey, Hola]
GOLDEN_ROOT_4 = bytes.fromhex("547e5b5fc5b576c45c4d3a009134b8b7488e1bd91056ea511b27605796ce5b2a")

# [Hello, Hi, Hey, Greetings, Hola] -> 6 leaves in node slots 5..10
GOLDEN_ROOT_5 = bytes.fromhex("2726972e59951950059620f70adb6361ad8509aa59802c22f6d3391e4f724b18")

NODE_TREE_VECTORS = [
    (
        [b"Hello", b"Hi", b"Hey", b"Hola"],
        bytes.fromhex("5f30cc80133b9394156e24b233f0c4be32b24e44bb3381f02c7ba52619d0febc"),
    ),
    (
        [b"Hello", b"Hi", b"Hey"],
        bytes.fromhex("bdd637c523ed5c0eab792b986db18850c239a2e23802b36aff26bb68fb3fe008"),
    ),
    (
        [b"Hello", b"Hi", b"Hey", b"Greetings", b"Hola"],
        bytes.fromhex("2ed873ae0dd2372777c57a685d907083ca97290e508f15478ca98bad3225ebbc"),
    ),
]

import pytest
from py_ecc.optimized_bn128 import G1, eq, multiply

from pairenc import abe, algos, encoding
from pairenc.errors import AttributeCountMismatch, DecodeError, InvalidAttributes, InvalidLength
from pairenc.groups import hash_to_g2
from pairenc.objects import ABECiphertext, ABEPrivateKey, parse_attributes
from pairenc.rand import SeededRandomSource

MESSAGE = b"Hello, ABE!"


@pytest.fixture(scope="module")
def keys(master):
    secret, _ = master
    return {n: abe.keygen(secret, ["attr{}".format(i) for i in range(n)]) for n in (1, 2, 3)}


@pytest.fixture(scope="module")
def ciphertexts(master):
    _, params = master
    return {n: abe.encrypt(params, ["attr{}".format(i) for i in range(n)], MESSAGE) for n in (1, 2, 3)}


def test_parse_attributes():
    assert parse_attributes("A,B,C") == ["A", "B", "C"]
    assert parse_attributes(" A , B,,C ,") == ["A", "B", "C"]
    assert parse_attributes(["A", "B"]) == ["A", "B"]
    assert parse_attributes(("A",)) == ["A"]
    assert len(parse_attributes(["a"] * 255)) == 255


def test_parse_byte_policy():
    assert parse_attributes(b"doctor") == [b"doctor"]
    assert parse_attributes(b" A , B,,C ,") == [b"A", b"B", b"C"]
    assert parse_attributes(bytearray(b"A,B")) == [b"A", b"B"]


@pytest.mark.parametrize("attributes", ["", " , ,", b"", b",", [], ["a"] * 256])
def test_parse_attributes_rejects(attributes):
    with pytest.raises(InvalidAttributes):
        parse_attributes(attributes)


def test_setup_sizes():
    secret, params = abe.setup(rng=SeededRandomSource(b"abe setup"))
    assert len(secret) == 32
    assert len(params) == 65


def test_cp_roundtrip(master):
    secret, params = master
    sk = abe.cp_keygen(secret, ["doctor", "cardiology", "senior"])
    assert sk.attributes == ["doctor", "cardiology", "senior"]
    assert len(sk.key) == 3 * 130

    ct = abe.cp_encrypt(params, "doctor, cardiology, senior", MESSAGE)
    assert abe.decrypt(sk.key, sk.attributes, ct) == MESSAGE


def test_kp_roundtrip(master):
    secret, params = master
    sk = abe.kp_keygen(secret, "A,B,C,D,E")
    assert sk.attributes == ["A", "B", "C", "D", "E"]

    ct = abe.kp_encrypt(params, ["A", "B", "C", "D", "E"], b"Multiple attributes test")
    assert abe.decrypt(sk.key, "A,B,C,D,E", ct) == b"Multiple attributes test"


def test_single_attribute(master, rng):
    secret, params = master
    sk = abe.keygen(secret, "A")
    ct = abe.encrypt(params, ["A"], b"Single attribute test", rng=rng)
    assert abe.decrypt(sk.key, sk.attributes, ct) == b"Single attribute test"


def test_ciphertext_layout(ciphertexts):
    for n, ct in ciphertexts.items():
        assert ct[0] == n
        assert len(ct) == 1 + 65 + len(MESSAGE) + n * 130
        assert ABECiphertext.from_binary(ct).get_size() == len(ct)


def test_only_first_attribute_protects_message(master, ciphertexts):
    secret, _ = master
    # same first attribute, different remaining attributes: still decrypts
    sk = abe.keygen(secret, ["attr0", "other", "unrelated"])
    assert abe.decrypt(sk.key, sk.attributes, ciphertexts[3]) == MESSAGE


def test_wrong_first_attribute_gives_garbage(master, ciphertexts):
    secret, _ = master
    sk = abe.keygen(secret, ["D", "E", "F"])
    wrong = abe.decrypt(sk.key, sk.attributes, ciphertexts[3])
    assert len(wrong) == len(MESSAGE)
    assert wrong != MESSAGE


def test_attribute_count_mismatch(keys, ciphertexts):
    for key_n, sk in keys.items():
        for ct_n, ct in ciphertexts.items():
            if key_n == ct_n:
                assert abe.decrypt(sk.key, sk.attributes, ct) == MESSAGE
                continue
            with pytest.raises(AttributeCountMismatch) as excinfo:
                abe.decrypt(sk.key, sk.attributes, ct)
            assert excinfo.value.expected == ct_n
            assert excinfo.value.actual == key_n


@pytest.mark.parametrize("attributes", [[], "", ["a"] * 256])
def test_attribute_count_mismatch_degenerate_key(ciphertexts, attributes):
    with pytest.raises(AttributeCountMismatch):
        abe.decrypt(b"", attributes, ciphertexts[1])


def test_byte_policy_roundtrip(master):
    secret, params = master
    sk = abe.keygen(secret, b"doctor,cardiology")
    assert sk.attributes == [b"doctor", b"cardiology"]
    assert len(sk.key) == 2 * 130
    # byte and text labels hash alike
    assert sk.key == abe.keygen(secret, "doctor, cardiology").key

    ct = abe.encrypt(params, "doctor,cardiology", MESSAGE)
    assert abe.decrypt(sk.key, b"doctor,cardiology", ct) == MESSAGE


def test_keygen_rejects_non_label_attributes(master):
    secret, _ = master
    with pytest.raises(TypeError):
        abe.keygen(secret, [100, 111])


def test_components_match_scalar(master):
    secret, params = master
    alpha = encoding.scalar_from_binary(secret)
    p_pub = encoding.g1_from_binary(params)
    attributes = ["A", "B"]

    ct = algos.abe_enc(p_pub, attributes, MESSAGE, SeededRandomSource(b"abe ephemeral"))
    s = SeededRandomSource(b"abe ephemeral").random_scalar()
    assert eq(ct.c0, multiply(G1, s))
    for c, attr in zip(ct.c_attrs, attributes):
        assert eq(c, multiply(hash_to_g2(attr), s))

    sk = abe.keygen(secret, attributes)
    for k, attr in zip(sk.components(), attributes):
        assert eq(k, multiply(hash_to_g2(attr), alpha))


def test_ciphertext_object_roundtrip(ciphertexts):
    ct = ciphertexts[2]
    assert ABECiphertext.from_binary(ct).to_binary() == ct


def test_private_key_object(keys):
    sk = keys[2]
    assert sk == ABEPrivateKey(sk.key, ["attr0", "attr1"])
    assert sk != keys[1]
    assert "attr0" in repr(sk)


def test_keygen_rejects_bad_input(master):
    secret, _ = master
    with pytest.raises(InvalidLength):
        abe.keygen(secret[:31], ["A"])
    with pytest.raises(InvalidAttributes):
        abe.keygen(secret, [])


def test_encrypt_rejects_bad_input(master):
    _, params = master
    with pytest.raises(InvalidLength):
        abe.encrypt(params[:64], ["A"], MESSAGE)
    with pytest.raises(InvalidLength):
        abe.encrypt(params, ["A"], b"")
    with pytest.raises(InvalidAttributes):
        abe.encrypt(params, "", MESSAGE)
    with pytest.raises(InvalidAttributes):
        abe.encrypt(params, ["a"] * 256, MESSAGE)


def test_decrypt_rejects_truncated_ciphertext(keys, ciphertexts):
    sk = keys[2]
    ct = ciphertexts[2]
    with pytest.raises(InvalidLength):
        abe.decrypt(sk.key, sk.attributes, ct[:65])
    # header announces two components but only one is present
    with pytest.raises(InvalidLength):
        abe.decrypt(sk.key, sk.attributes, ct[:1 + 65 + 130])
    # no room left for V
    with pytest.raises(InvalidLength):
        abe.decrypt(sk.key, sk.attributes, ct[:1 + 65] + ct[-2 * 130:])


def test_decrypt_rejects_short_key(keys, ciphertexts):
    sk = keys[2]
    with pytest.raises(InvalidLength):
        abe.decrypt(sk.key[:130], sk.attributes, ciphertexts[2])


def test_decrypt_rejects_malformed_points(keys, ciphertexts):
    sk = keys[1]
    ct = ciphertexts[1]
    with pytest.raises(DecodeError):
        abe.decrypt(sk.key, sk.attributes, ct[:1] + b"\x05" + ct[2:])
    with pytest.raises(DecodeError):
        abe.decrypt(b"\x05" + sk.key[1:], sk.attributes, ct)


def test_decrypt_skips_attribute_components(keys, ciphertexts):
    sk = keys[2]
    ct = bytearray(ciphertexts[2])
    # break the last attribute component; decryption never reads it
    ct[-2] ^= 1
    ct = bytes(ct)
    with pytest.raises(DecodeError):
        ABECiphertext.from_binary(ct)
    assert abe.decrypt(sk.key, sk.attributes, ct) == MESSAGE

    n, c0, v = ABECiphertext.header_from_binary(ct)
    assert n == 2
    assert v == ct[1 + 65:-2 * 130]

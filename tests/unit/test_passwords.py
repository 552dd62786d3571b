from content_service.utils.passwords import hash_password, verify_password


def test_hash_is_argon2id_bytes():
    encoded = hash_password("s3cret")
    assert isinstance(encoded, bytes)
    assert encoded.startswith(b"$argon2id$")


def test_hashes_are_salted():
    assert hash_password("same") != hash_password("same")


def test_verify():
    encoded = hash_password("s3cret")
    assert verify_password("s3cret", encoded)
    assert not verify_password("wrong", encoded)
    assert not verify_password("", encoded)
    assert not verify_password("s3cret", b"")
    assert not verify_password("s3cret", b"pbkdf2$not-argon")

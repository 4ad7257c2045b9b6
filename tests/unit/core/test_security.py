import pytest

from roster.core.security import Pbkdf2CredentialTransform, credentials_match, get_credential_transform


@pytest.mark.unit
def test_transform_is_deterministic_and_one_way():
    transform = Pbkdf2CredentialTransform("salt", iterations=1000)
    first = transform.transform("hunter2")
    assert first == transform.transform("hunter2")
    assert first != "hunter2"
    assert first != transform.transform("hunter3")
    assert len(first) == 64


@pytest.mark.unit
def test_salt_changes_output():
    a = Pbkdf2CredentialTransform("salt-a", iterations=1000)
    b = Pbkdf2CredentialTransform("salt-b", iterations=1000)
    assert a.transform("same") != b.transform("same")


@pytest.mark.unit
@pytest.mark.parametrize("salt, iterations", [("", 1000), ("salt", 0)])
def test_rejects_bad_parameters(salt, iterations):
    with pytest.raises(ValueError):
        Pbkdf2CredentialTransform(salt, iterations=iterations)


@pytest.mark.unit
def test_credentials_match():
    assert credentials_match("abc", "abc")
    assert not credentials_match("abc", "abd")
    assert not credentials_match("abc", "")


@pytest.mark.unit
def test_transform_from_settings(settings):
    expected = Pbkdf2CredentialTransform(
        settings.credential_salt.get_secret_value(), iterations=settings.credential_iterations
    )
    assert get_credential_transform().transform("pw") == expected.transform("pw")

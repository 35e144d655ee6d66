from op_credentials.credentials import CredentialsProtocol, MappingCredentials


def test_mapping_credentials_fetch() -> None:
    credentials = MappingCredentials({"API_KEY": "abc"})
    assert credentials.fetch("API_KEY") == "abc"
    assert credentials.fetch("MISSING", "fallback") == "fallback"
    assert credentials.fetch("MISSING") is None


def test_mapping_credentials_copies_input() -> None:
    source = {"API_KEY": "abc"}
    credentials = MappingCredentials(source)
    source["API_KEY"] = "changed"
    assert credentials.fetch("API_KEY") == "abc"


def test_mapping_credentials_satisfies_protocol() -> None:
    assert isinstance(MappingCredentials(), CredentialsProtocol)

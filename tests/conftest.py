"""Shared pytest fixtures and sample documents for isoval tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from isoval.config.settings import IsovalSettings
from isoval.services.validate import ValidationService

ADMI_NS = "urn:iso:std:iso:20022:tech:xsd:admi.004.001.02"
REDA_NS = "urn:iso:std:iso:20022:tech:xsd:reda.033.001.01"

SYSTEM_EVENT_XML = f"""<?xml version="1.0" encoding="UTF-8"?>
<Document xmlns="{ADMI_NS}">
  <SysEvtNtfctn>
    <EvtInf>
      <EvtCd>PING</EvtCd>
      <EvtParam>first</EvtParam>
      <EvtParam>second</EvtParam>
      <EvtDesc>Connectivity check</EvtDesc>
      <EvtTm>2024-05-01T10:00:00</EvtTm>
    </EvtInf>
  </SysEvtNtfctn>
</Document>
"""

AUDIT_TRAIL_QUERY_XML = f"""<?xml version="1.0" encoding="UTF-8"?>
<Document xmlns="{REDA_NS}">
  <SctiesAudtTrlQry>
    <MsgHdr><MsgId>MSG-001</MsgId></MsgHdr>
    <SchCrit>
      <FinInstrmId>
        <ISIN>US0378331005</ISIN>
        <OthrId><Id>037833100</Id><Tp><Cd>CUSP</Cd></Tp></OthrId>
      </FinInstrmId>
      <DtPrd><FrToDt><FrDt>2024-01-01</FrDt><ToDt>2024-01-31</ToDt></FrToDt></DtPrd>
    </SchCrit>
  </SctiesAudtTrlQry>
</Document>
"""

KEY_ADDITION_XML = """<?xml version="1.0" encoding="UTF-8"?>
<FedNowMessageSignatureKeyExchange>
  <KeyAddition>
    <Key>
      <FedNowKeyID>key-0001</FedNowKeyID>
      <Name>signing_key</Name>
      <EncodedPublicKey>MFkwEwYHKoZIzj0CAQYIKoZIzj0DAQcDQgAE</EncodedPublicKey>
      <Encoding>PEM</Encoding>
      <Algorithm>ECDSA-P256</Algorithm>
    </Key>
  </KeyAddition>
</FedNowMessageSignatureKeyExchange>
"""

PUBLIC_KEYS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<FedNowPublicKeyResponses>
  <PublicKeys>
    <FedNowMessageSignatureKeyStatus>
      <KeyStatus>ACTIVE</KeyStatus>
      <StatusDateTime>2024-05-01T10:00:00</StatusDateTime>
    </FedNowMessageSignatureKeyStatus>
    <FedNowMessageSignatureKey>
      <FedNowKeyID>key-0001</FedNowKeyID>
      <Name>signing_key</Name>
      <EncodedPublicKey>MFkw</EncodedPublicKey>
      <Encoding>PEM</Encoding>
    </FedNowMessageSignatureKey>
  </PublicKeys>
</FedNowPublicKeyResponses>
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory so no stray config file is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ISOVAL_CONFIG", raising=False)


@pytest.fixture
def settings(_isolated_cwd: None) -> IsovalSettings:
    """Default settings, read from no config file."""
    return IsovalSettings.from_cli()


@pytest.fixture
def service(settings: IsovalSettings) -> ValidationService:
    return ValidationService(settings)


@pytest.fixture
def samples(tmp_path: Path) -> Path:
    """Directory holding one valid document per catalogued message."""
    directory = tmp_path / "samples"
    directory.mkdir()
    (directory / "event.xml").write_text(SYSTEM_EVENT_XML, encoding="utf-8")
    (directory / "query.xml").write_text(AUDIT_TRAIL_QUERY_XML, encoding="utf-8")
    (directory / "key.xml").write_text(KEY_ADDITION_XML, encoding="utf-8")
    (directory / "keys.xml").write_text(PUBLIC_KEYS_XML, encoding="utf-8")
    return directory

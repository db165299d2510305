"""reda.033.001.01 Securities Audit Trail Query.

Supplementary data (``SplmtryData``) carries arbitrary markup and is not
modelled.
"""

from __future__ import annotations

from pydantic import Field

from isoval.domain.records import Choice, Record
from isoval.schemas.common import (
    ExternalFinancialInstrumentIdentificationType1Code,
    ISIN2021Identifier,
    ISODate,
    ISODateTime,
    Max16Text,
    Max35Text,
    Max140Text,
)

MESSAGE_ID = "reda.033.001.01"
ROOT_TAG = "SctiesAudtTrlQry"


class MessageHeader1(Record):
    msg_id: Max35Text = Field(alias="MsgId")
    cre_dt_tm: ISODateTime | None = Field(None, alias="CreDtTm")


class DatePeriod2(Record):
    fr_dt: ISODate = Field(alias="FrDt")
    to_dt: ISODate = Field(alias="ToDt")


class DatePeriodSearch1Choice(Choice):
    fr_dt: ISODate | None = Field(None, alias="FrDt")
    to_dt: ISODate | None = Field(None, alias="ToDt")
    fr_to_dt: DatePeriod2 | None = Field(None, alias="FrToDt")
    eq_dt: ISODate | None = Field(None, alias="EQDt")
    neq_dt: ISODate | None = Field(None, alias="NEQDt")


class IdentificationSource3Choice(Choice):
    cd: ExternalFinancialInstrumentIdentificationType1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class OtherIdentification1(Record):
    id: Max35Text = Field(alias="Id")
    sfx: Max16Text | None = Field(None, alias="Sfx")
    tp: IdentificationSource3Choice = Field(alias="Tp")


class SecurityIdentification39(Record):
    isin: ISIN2021Identifier | None = Field(None, alias="ISIN")
    othr_id: list[OtherIdentification1] = Field(default_factory=list, alias="OthrId")
    desc: Max140Text | None = Field(None, alias="Desc")


class SecuritiesAuditTrailSearchCriteria4(Record):
    fin_instrm_id: SecurityIdentification39 | None = Field(None, alias="FinInstrmId")
    dt_prd: DatePeriodSearch1Choice | None = Field(None, alias="DtPrd")


class SecuritiesAuditTrailQueryV01(Record):
    msg_hdr: MessageHeader1 | None = Field(None, alias="MsgHdr")
    sch_crit: SecuritiesAuditTrailSearchCriteria4 = Field(alias="SchCrit")

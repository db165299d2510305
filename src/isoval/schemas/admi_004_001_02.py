"""admi.004.001.02 System Event Notification."""

from __future__ import annotations

from pydantic import Field

from isoval.domain.records import Record
from isoval.schemas.common import ISODateTime, Max4AlphaNumericText, Max35Text, Max1000Text

MESSAGE_ID = "admi.004.001.02"
ROOT_TAG = "SysEvtNtfctn"


class Event2(Record):
    evt_cd: Max4AlphaNumericText = Field(alias="EvtCd")
    evt_param: list[Max35Text] = Field(default_factory=list, alias="EvtParam")
    evt_desc: Max1000Text | None = Field(None, alias="EvtDesc")
    evt_tm: ISODateTime | None = Field(None, alias="EvtTm")


class SystemEventNotificationV02(Record):
    evt_inf: Event2 = Field(alias="EvtInf")

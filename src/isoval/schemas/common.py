"""Simple and complex types shared across ISO 20022 message sets.

Generated-style schema data: one class per XSD type, named as in the
ISO 20022 repository. Dates and date-times stay as their lexical strings.
"""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum
from typing import Annotated

from pydantic import Field

from isoval.domain.constraints import NumericConstraint, TextConstraint
from isoval.domain.records import Choice, Record, XmlAttribute, XmlText
from isoval.domain.values import ConstrainedDecimal, ConstrainedText, enumeration_of

ISODate = str
ISODateTime = str

# --- Text simple types ---


class Max4AlphaNumericText(ConstrainedText):
    constraint = TextConstraint(min_length=1, max_length=4, pattern=r"[a-zA-Z0-9]{1,4}")


class Max16Text(ConstrainedText):
    constraint = TextConstraint(min_length=1, max_length=16)


class Max34Text(ConstrainedText):
    constraint = TextConstraint(min_length=1, max_length=34)


class Max35Text(ConstrainedText):
    constraint = TextConstraint(min_length=1, max_length=35)


class Max140Text(ConstrainedText):
    constraint = TextConstraint(min_length=1, max_length=140)


class Max350Text(ConstrainedText):
    constraint = TextConstraint(min_length=1, max_length=350)


class Max1000Text(ConstrainedText):
    constraint = TextConstraint(min_length=1, max_length=1000)


# --- Identifiers and codes ---


class ActiveCurrencyCode(ConstrainedText):
    constraint = TextConstraint(pattern=r"[A-Z]{3,3}")


class ActiveOrHistoricCurrencyCode(ConstrainedText):
    constraint = TextConstraint(pattern=r"[A-Z]{3,3}")


class IBAN2007Identifier(ConstrainedText):
    constraint = TextConstraint(pattern=r"[A-Z]{2,2}[0-9]{2,2}[a-zA-Z0-9]{1,30}")


class ISIN2021Identifier(ConstrainedText):
    constraint = TextConstraint(pattern=r"[A-Z]{2,2}[A-Z0-9]{9,9}[0-9]{1,1}")


class ExternalAccountIdentification1Code(ConstrainedText):
    constraint = TextConstraint(min_length=1, max_length=4)


class ExternalFinancialInstrumentIdentificationType1Code(ConstrainedText):
    constraint = TextConstraint(min_length=1, max_length=4)


class AccountStatus3Codes(StrEnum):
    """Code list of ``AccountStatus3Code``."""

    ENABLED = "ENAB"
    DISABLED = "DISA"
    DELETED = "DELE"
    FORMER = "FORM"


class AccountStatus3Code(ConstrainedText):
    constraint = TextConstraint(enumeration=enumeration_of(AccountStatus3Codes))


# --- Amounts ---


class ActiveCurrencyAndAmountSimpleType(ConstrainedDecimal):
    constraint = NumericConstraint(min_inclusive=Decimal("0"))


class ActiveCurrencyAndAmount(Record):
    """Amount with its currency carried in the ``Ccy`` attribute."""

    ccy: Annotated[ActiveCurrencyCode, XmlAttribute()] = Field(alias="Ccy")
    value: Annotated[ActiveCurrencyAndAmountSimpleType, XmlText()]


# --- Account identification ---


class AccountSchemeName1Choice(Choice):
    cd: ExternalAccountIdentification1Code | None = Field(None, alias="Cd")
    prtry: Max35Text | None = Field(None, alias="Prtry")


class GenericAccountIdentification1(Record):
    id: Max34Text = Field(alias="Id")
    schme_nm: AccountSchemeName1Choice | None = Field(None, alias="SchmeNm")
    issr: Max35Text | None = Field(None, alias="Issr")


class AccountIdentification4Choice(Choice):
    iban: IBAN2007Identifier | None = Field(None, alias="IBAN")
    othr: GenericAccountIdentification1 | None = Field(None, alias="Othr")


class AccountForAction1(Record):
    id: AccountIdentification4Choice = Field(alias="Id")
    ccy: ActiveCurrencyCode = Field(alias="Ccy")

# tests/conftest.py
from __future__ import annotations

import pytest

from qif_ledger.data_model.q_wrapper.financial_data import FinancialData
from qif_ledger.data_model.qif_parsers_emitters.qif_reader import QifReader

SAMPLE_QIF = """\
!Account
NChecking
TBank
DJoint checking
^
!Type:Bank
D1/ 5'24
T2,500.00
C*
PEmployer
LSalary
^
D01/10/2024
T-300.00
N101
PLandlord
LRent/Home
MJanuary rent
^
D01/12/2024
T-500.00
PTransfer to card
L[Visa]
^
D01/20/2024
T-100.00
PSupermarket
L--Split--
SGroceries
EFood
$-60.00
SHousehold
$-40.00
XUnknown field
^
!Account
NVisa
TCCard
^
!Type:CCard
D01/12/2024
T500.00
PPayment
L[Checking]
^
D02/03/2024
T-42.50
PCorner Market
LGroceries
^
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_QIF


@pytest.fixture
def ledger() -> FinancialData:
    return QifReader().read(SAMPLE_QIF)

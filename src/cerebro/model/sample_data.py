"""
Sample companies for a fresh session.
"""

from cerebro.model.company import Company
from cerebro.model.fields import Address, Email, Name, Phone, Remark, Tag
from cerebro.model.status import Stage, Status


def _tags(*names: str) -> frozenset[Tag]:
    return frozenset(Tag(name) for name in names)


def sample_companies() -> list[Company]:
    return [
        Company(
            Name("Google"),
            Phone("+65 6521 8000"),
            Email("careers@google.com"),
            Address("70 Pasir Panjang Rd, #03-71 Mapletree Business City II"),
            _tags("FAANG", "remote-work"),
            Remark("Referral from alumni network"),
            Status(Stage.APPLIED),
        ),
        Company(
            Name("Shopee"),
            Phone("62708100"),
            Email("talent@shopee.com"),
            Address("5 Science Park Dr, Shopee Building"),
            _tags("ecommerce"),
            Remark(None),
            Status(Stage.OA),
        ),
        Company(
            Name("Grab"),
            Phone("000"),
            Email("noemail@placeholder.com"),
            Address("3 Media Cl, Singapore 138498"),
            _tags("ride-hailing", "fintech"),
            Remark("Ask about the summer intake"),
            Status(Stage.TECH_INTERVIEW),
        ),
        Company(
            Name("DBS Bank"),
            Phone("1800 111 1111"),
            Email("graduate@dbs.com"),
            Address("12 Marina Blvd, DBS Asia Central"),
            _tags("banking", "fintech"),
            Remark(None),
            Status(Stage.TO_APPLY),
        ),
    ]

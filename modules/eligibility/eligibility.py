from core.types import Block

id = "eligibility"
title = "Eligibility Checklist"

INCLUSION = "{n}) ______________________    Met ☐    Not Met ☐    Evidence: __________"
EXCLUSION = "{n}) ______________________    Absent ☐    Present (exclusion) ☐    Evidence: __________"

blocks = [
    Block.subtitle("INCLUSION CRITERIA:"),
    *[Block.bullet(INCLUSION.format(n=n)) for n in range(1, 4)],
    Block.subtitle("EXCLUSION CRITERIA:"),
    *[Block.bullet(EXCLUSION.format(n=n)) for n in range(1, 4)],
    Block.signature("Investigator"),
]

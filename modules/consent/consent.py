from core.types import Block

id = "consent"
title = "Informed Consent Checklist"

blocks = [
    Block.field("icf_version", "ICF Version/Date"),
    Block.field("irb", "IRB"),
    Block.bullet("Private area used; identity verified"),
    Block.bullet("Provided IRB-approved ICF and time to review"),
    Block.bullet("Discussed purpose, procedures, risks/benefits, alternatives"),
    Block.bullet("Questions answered; no coercion/undue influence"),
    Block.bullet("Assessed comprehension (teach-back)"),
    Block.bullet("Signatures obtained before any procedures"),
    Block.para("Signature Times (24-hr): Participant ____:____  LAR ____:____  POC ____:____"),
]

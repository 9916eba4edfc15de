from core.types import Block

id = "randomization"
title = "Randomization"

blocks = [
    Block.field("randomization_no", "Randomization No."),
    Block.para("Randomization date/time: ____-___-____  ____:____"),
    Block.bullet("Eligibility confirmed by Investigator before randomization ☐"),
    Block.bullet("IWRS/IRT confirmation printed and filed ☐"),
    Block.bullet("Blinding maintained ☐"),
    Block.signature("Randomized by"),
]

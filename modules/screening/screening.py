from core.types import Block

id = "screening"
title = "Screening Visit"

blocks = [
    Block.field("screening_no", "Screening No."),
    Block.bullet("ICF signed before any screening procedure ☐"),
    Block.bullet("Demographics recorded (year of birth, sex, race/ethnicity) ☐"),
    Block.bullet("Medical / surgical history reviewed ☐"),
    Block.bullet("Prior and concomitant medications reviewed ☐"),
    Block.para("Screening outcome: Eligible ☐  Screen failure ☐  Reason: ______________________"),
    Block.signature("Investigator"),
]

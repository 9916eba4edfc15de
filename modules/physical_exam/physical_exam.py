from core.types import Block

id = "physical_exam"
title = "Physical Exam (Investigator)"

blocks = [
    Block.para("Focused/Full Physical Exam (check systems; document abnormals):"),
    Block.bullet("General | HEENT | Cardiac | Respiratory | Abdomen | Musculoskeletal | Skin"),
    Block.para("Findings / Notes: _______________________________________________________________"),
    Block.pi(),
    Block.signature("Investigator"),
]

from core.types import Block

id = "baseline"
title = "Baseline Assessments"

blocks = [
    Block.para("Complete all baseline assessments before first dose."),
    Block.grid(["Assessment", "Done?", "Date", "Time", "Initials"], rows=4),
    Block.bullet("Baseline symptoms / ongoing conditions recorded as medical history ☐"),
    Block.pi(),
    Block.signature("Investigator"),
]

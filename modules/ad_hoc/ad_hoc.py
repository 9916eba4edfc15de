from core.types import Block

id = "ad_hoc"
title = "Ad-hoc / Unscheduled Assessment"

blocks = [
    Block.field("reason", "Reason for unscheduled assessment"),
    Block.para("Assessments performed: _______________________________________________________"),
    Block.para("Findings / Notes: _______________________________________________________________"),
    Block.pi(),
    Block.signature("Investigator"),
]

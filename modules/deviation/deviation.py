from core.types import Block

id = "deviation"
title = "Protocol Deviation"

blocks = [
    Block.grid(["Date identified", "Description", "Category", "Reported to IRB?", "Reported to Sponsor?"], rows=2),
    Block.para("Corrective / preventive action: ______________________________________________"),
    Block.signature("Investigator"),
]

from core.types import Block

id = "imaging"
title = "Imaging / Radiology"

blocks = [
    Block.grid(["Modality (CT/MRI/US/X-ray)", "Body region", "Date/Time", "Performed at (facility)"], rows=2),
    Block.bullet("Result summary / Impression: _________________________________________________"),
    Block.pi(),
    Block.para("If images/reports provided, file under Attachments and reference file name(s)."),
]

from core.types import Block

id = "neuro_exam"
title = "Neurological Exam (Investigator)"

blocks = [
    Block.para("Neurological Exam (document abnormals/changes):"),
    Block.bullet("Mental status | Cranial nerves | Motor | Sensory | Reflexes | Coordination | Gait"),
    Block.para("Findings / Notes: _______________________________________________________________"),
    Block.pi(),
    Block.signature("Investigator"),
]

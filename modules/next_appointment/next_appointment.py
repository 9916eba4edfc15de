from core.types import Block

id = "next_appointment"
title = "Next Appointment / Instructions"

blocks = [
    Block.bullet("Next visit date: ____-___-____  Window: ______  Time: ____:____"),
    Block.bullet("Instructions provided: ________________________________________________"),
    Block.bullet("Coordinator contact: __________________  Phone: __________________"),
]

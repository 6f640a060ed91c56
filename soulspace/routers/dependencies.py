# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import Request
from soulspace.services.companion import Companion


# Dependency to get the running companion
def get_companion(request: Request) -> Companion:
    return request.app.state.companion

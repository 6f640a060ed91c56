# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the SoulSpace - Your Wellness Companion project.
# Licensed under the MIT License - see the LICENSE file for details.


from .storage_entry import StorageEntry

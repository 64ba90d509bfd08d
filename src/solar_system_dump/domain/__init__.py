# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Pure snapshot-to-document transform. Only stdlib and numpy imports."""

# SPDX-FileCopyrightText: 2025-present DouglasMacKrell <d.mackrell@gmail.com>
#
# SPDX-License-Identifier: MIT

"""ReelSort - Video File Classifier and Library Organizer."""

from reelsort.__about__ import __version__

__all__ = ["__version__"]

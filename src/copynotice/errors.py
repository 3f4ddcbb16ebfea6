# copynotice - source code notice writer
# Copyright (C) 2024-2026 copynotice Contributors
# SPDX-License-Identifier: GPL-3.0-or-later


class CopyNoticeError(RuntimeError):
    """Fatal condition that aborts the whole run."""


class DirectoryListingError(CopyNoticeError):
    pass


class OutputDirectoryError(CopyNoticeError):
    pass


class EnumerationError(CopyNoticeError):
    pass


class PromptClosedError(CopyNoticeError):
    pass

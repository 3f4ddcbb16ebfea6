# copynotice - source code notice writer
# Copyright (C) 2024-2026 copynotice Contributors
# SPDX-License-Identifier: GPL-3.0-or-later

from .main import main

raise SystemExit(main())

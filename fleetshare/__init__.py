# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Vehicle-sharing demo backend: accounts, bearer tokens and simulated vehicles."""

__version__ = "0.1.0"

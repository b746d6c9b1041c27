# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Bundled JavaScript resources loaded into the embedded interpreter."""

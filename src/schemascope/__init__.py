# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schemascope: runtime schema introspection and insert-form synthesis."""

__version__ = "0.1.0"

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Text, escaping and tree helpers used by the converter."""

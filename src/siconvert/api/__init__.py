"""HTTP interface for siconvert."""

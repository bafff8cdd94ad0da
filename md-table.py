#!/usr/bin/env python3
"""
GitHub PR Stats markdown table
Renders gh-stats JSON files as a markdown approvals summary.
"""

from pr_stats.cli import md_table


if __name__ == "__main__":
    md_table()

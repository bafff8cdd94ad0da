#!/usr/bin/env python3
"""
GitHub PR Stats
Collects review, comment and commit counts for PRs merged in a date window.
"""

from pr_stats.cli import main


if __name__ == "__main__":
    main()

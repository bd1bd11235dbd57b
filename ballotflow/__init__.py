"""
ballotflow - Administrator-driven single election workflow

One owner drives an election through fixed phases (voter registration,
proposal registration, voting, tallying) while a whitelist restricts who
may act at each phase. The tally engine reports every winning proposal,
including ties.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]

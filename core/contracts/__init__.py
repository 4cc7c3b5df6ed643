"""core.contracts

Interfaces (ABCs) shared between the navigation layer and the pages.
Pages depend on these contracts, never on the main window itself.
"""

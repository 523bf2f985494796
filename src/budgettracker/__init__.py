# Import main lazily to avoid circular dependencies
def __getattr__(name):
    if name == "main":
        from budgettracker.cli.main import main
        return main
    if name == "Ledger":
        from budgettracker.domain.ledger import Ledger
        return Ledger
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")

from .cli_orchestrator import CLIOrchestrator

__all__ = ["CLIOrchestrator"]

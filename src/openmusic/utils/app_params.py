from dataclasses import dataclass

# dataclass containing all the configuration data our app needs
@dataclass()
class AppParams:
    database_url: str
    log_enabled: bool
    log_level: int
    log_filepath: str
    db_echo: bool

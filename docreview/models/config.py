from pydantic import BaseModel


class EnvConfig(BaseModel):
    """
    Declares one environment setting a client needs.

    Attributes:
        env_key (str): Key of the setting without the client prefix, e.g. "BASE_URL" for "STORE_BASE_URL".
        val_type (str): Expected value type. Supported types are "string", "number", "bool" and "list".
        default (str | int | float | bool | list | None): Fallback if the variable is not set. None marks the setting as required.
    """

    env_key: str
    val_type: str = "string"
    default: str | int | float | bool | list | None = None

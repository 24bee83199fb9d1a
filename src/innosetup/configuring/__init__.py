"""Settings of innosetup, loaded from YAML files and validated with Pydantic."""

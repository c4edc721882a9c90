

class JSONMarkError(Exception):
    """Base for all jsonmark exceptions."""

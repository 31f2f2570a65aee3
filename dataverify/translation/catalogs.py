"""Built-in message catalogs for the ``validators`` domain.

Placeholders: ``{field}`` (alias or field path), ``{value}`` (the failing
value) and one placeholder per rule parameter.
"""

EN = {
    "validation": {
        # Core
        "required": "The field {field} is required",
        # Type
        "string": "The field {field} must be a string",
        "int": "The field {field} must be an integer",
        "numeric": "The field {field} must be numeric",
        "boolean": "The field {field} must be a boolean",
        "list": "The field {field} must be a list",
        "dict": "The field {field} must be a dictionary",
        "object": "The field {field} must be an object",
        "json": "The field {field} must be valid JSON",
        # String
        "email": "The field {field} must be a valid email address",
        "disposable_email": "The field {field} cannot be a disposable email address",
        "url": "The field {field} must be a valid URL",
        "disposable_url_domain": "The field {field} cannot use a disposable URL domain",
        "ip_address": "The field {field} must be a valid IP address",
        "min_length": "The field {field} must be at least {min} characters",
        "max_length": "The field {field} must not exceed {max} characters",
        "regex": "The field {field} does not match the required pattern",
        "alphanumeric": "The field {field} must be alphanumeric",
        "not_alphanumeric": "The field {field} must not be alphanumeric",
        "contains_lower": "The field {field} must contain at least one lowercase letter",
        "contains_upper": "The field {field} must contain at least one uppercase letter",
        "contains_number": "The field {field} must contain at least one number",
        "contains_special_character": "The field {field} must contain at least one special character",
        # Numeric
        "between": "The field {field} must be between {min} and {max}",
        "greater_than": "The field {field} must be greater than {min}",
        "lower_than": "The field {field} must be less than {max}",
        # Comparison
        "is_in": "The field {field} must be one of: {allowed}",
        "not_in": "The field {field} must not be one of: {forbidden}",
        # Date
        "date": "The field {field} must be a valid date",
        # File
        "file_exists": "The file {field} does not exist",
        "file_mime": "The file {field} must be of type {mime}",
    }
}

FR = {
    "validation": {
        "required": "Le champ {field} est requis",
        "string": "Le champ {field} doit être une chaîne de caractères",
        "int": "Le champ {field} doit être un entier",
        "numeric": "Le champ {field} doit être numérique",
        "boolean": "Le champ {field} doit être un booléen",
        "list": "Le champ {field} doit être une liste",
        "dict": "Le champ {field} doit être un dictionnaire",
        "object": "Le champ {field} doit être un objet",
        "json": "Le champ {field} doit être un JSON valide",
        "email": "Le champ {field} doit être une adresse email valide",
        "disposable_email": "Le champ {field} ne peut pas être une adresse email jetable",
        "url": "Le champ {field} doit être une URL valide",
        "disposable_url_domain": "Le champ {field} ne peut pas utiliser un domaine d'URL jetable",
        "ip_address": "Le champ {field} doit être une adresse IP valide",
        "min_length": "Le champ {field} doit contenir au moins {min} caractères",
        "max_length": "Le champ {field} ne doit pas dépasser {max} caractères",
        "regex": "Le champ {field} ne correspond pas au format requis",
        "alphanumeric": "Le champ {field} doit être alphanumérique",
        "not_alphanumeric": "Le champ {field} ne doit pas être alphanumérique",
        "contains_lower": "Le champ {field} doit contenir au moins une lettre minuscule",
        "contains_upper": "Le champ {field} doit contenir au moins une lettre majuscule",
        "contains_number": "Le champ {field} doit contenir au moins un chiffre",
        "contains_special_character": "Le champ {field} doit contenir au moins un caractère spécial",
        "between": "Le champ {field} doit être compris entre {min} et {max}",
        "greater_than": "Le champ {field} doit être supérieur à {min}",
        "lower_than": "Le champ {field} doit être inférieur à {max}",
        "is_in": "Le champ {field} doit être l'une des valeurs : {allowed}",
        "not_in": "Le champ {field} ne doit pas être l'une des valeurs : {forbidden}",
        "date": "Le champ {field} doit être une date valide",
        "file_exists": "Le fichier {field} n'existe pas",
        "file_mime": "Le fichier {field} doit être de type {mime}",
    }
}

CATALOGS = {"en": EN, "fr": FR}

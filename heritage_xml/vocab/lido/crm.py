"""CIDOC-CRM class table used for LIDO categories and event types."""

from __future__ import annotations

CRM_CONCEPT_URI = "http://www.cidoc-crm.org/crm-concepts/"

CRM_CLASSES: dict[str, str] = {
    "E1": "CRM Entity",
    "E2": "Temporal Entity",
    "E3": "Condition State",
    "E4": "Period",
    "E5": "Event",
    "E6": "Destruction",
    "E7": "Activity",
    "E8": "Acquisition",
    "E9": "Move",
    "E10": "Transfer of Custody",
    "E11": "Modification",
    "E12": "Production",
    "E13": "Attribute Assignment",
    "E14": "Condition Assessment",
    "E15": "Identifier Assignment",
    "E16": "Measurement",
    "E17": "Type Assignment",
    "E18": "Physical Thing",
    "E19": "Physical Object",
    "E20": "Biological Object",
    "E21": "Person",
    "E22": "Man-Made Object",
    "E24": "Physical Man-Made Thing",
    "E25": "Man-Made Feature",
    "E26": "Physical Feature",
    "E27": "Site",
    "E28": "Conceptual Object",
    "E29": "Design or Procedure",
    "E30": "Right",
    "E31": "Document",
    "E32": "Authority Document",
    "E33": "Linguistic Object",
    "E34": "Inscription",
    "E35": "Title",
    "E36": "Visual Item",
    "E37": "Mark",
    "E38": "Image",
    "E39": "Actor",
    "E40": "Legal Body",
    "E41": "Appellation",
    "E42": "Identifier",
    "E44": "Place Appellation",
    "E45": "Address",
    "E46": "Section Definition",
    "E47": "Spatial Coordinates",
    "E48": "Place Name",
    "E49": "Time Appellation",
    "E50": "Date",
    "E51": "Contact Point",
    "E52": "Time-Span",
    "E53": "Place",
    "E54": "Dimension",
    "E55": "Type",
    "E56": "Language",
    "E57": "Material",
    "E58": "Measurement Unit",
    "E63": "Beginning of Existence",
    "E64": "End of Existence",
    "E65": "Creation",
    "E66": "Formation",
    "E67": "Birth",
    "E68": "Dissolution",
    "E69": "Death",
    "E70": "Thing",
    "E71": "Man-Made Thing",
    "E72": "Legal Object",
    "E73": "Information Object",
    "E74": "Group",
    "E75": "Conceptual Object Appellation",
    "E77": "Persistent Item",
    "E78": "Collection",
    "E79": "Part Addition",
    "E80": "Part Removal",
    "E81": "Transformation",
    "E82": "Actor Appellation",
    "E83": "Type Creation",
    "E84": "Information Carrier",
    "E85": "Joining",
    "E86": "Leaving",
    "E87": "Curation Activity",
    "E89": "Propositional Object",
    "E90": "Symbolic Object",
    "E92": "Spacetime Volume",
    "E93": "Presence",
    "E94": "Space Primitive",
    "E95": "Spacetime Primitive",
    "E96": "Purchase",
    "E97": "Monetary Amount",
    "E98": "Currency",
    "E99": "Product Type",
}


def normalize_crm_id(crm_id: str) -> str:
    """Reduce ``E22``, ``e22`` or ``E22_Man-Made_Object`` to ``E22``."""
    return crm_id.strip().split("_", 1)[0].upper()


def class_name(crm_id: str) -> str:
    """Return the English label of a CRM class.

    Raises:
        KeyError: If the class is not in the table
    """
    key = normalize_crm_id(crm_id)
    try:
        return CRM_CLASSES[key]
    except KeyError:
        raise KeyError(f"Unknown CIDOC-CRM class: {crm_id}") from None


def format_uri(crm_id: str) -> str:
    return CRM_CONCEPT_URI + normalize_crm_id(crm_id)


__all__ = ["CRM_CLASSES", "CRM_CONCEPT_URI", "class_name", "format_uri", "normalize_crm_id"]

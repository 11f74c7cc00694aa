from .enum_classes import RequestStatus, CloudKind, RelationshipType

"""
Participants App - Coffee Rotation Roster

Keeps the ordered list of people who take turns buying coffee, and the
audit trail of manual reorders.

Key Features:
- Participant CRUD with unique, non-empty names
- New participants join at the back of the rotation
- Deletion blocked while a participant has purchase history
- Transactional reorder with a bounded before/after history

Architecture:
- Models: Participant, ReorderHistoryEntry
- Services: participant_management, reorder
- Views: function-based API views
"""

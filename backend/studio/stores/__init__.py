from studio.stores.interfaces import AssignmentStore
from studio.stores.memory import InMemoryAssignmentStore
from studio.stores.supabase import SupabaseAssignmentStore

__all__ = [
    "AssignmentStore",
    "InMemoryAssignmentStore",
    "SupabaseAssignmentStore",
]

from toolkicker.core.domain.shared.id_generator import new_id, now_millis, to_base36

__all__ = ["new_id", "now_millis", "to_base36"]

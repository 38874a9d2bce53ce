"""Records surfaced from the flat settings documents."""


class CategoryColor:
    def __init__(self, id, category_name, color, created_at=None, updated_at=None):
        self.id = id
        self.category_name = category_name
        self.color = color
        self.created_at = created_at
        self.updated_at = updated_at

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'categoryName': self.category_name,
            'color': self.color,
            'createdAt': self.created_at.isoformat() if hasattr(self.created_at, 'isoformat') else self.created_at,
            'updatedAt': self.updated_at.isoformat() if hasattr(self.updated_at, 'isoformat') else self.updated_at,
        }


class CategoryPosition:
    def __init__(self, category_name, position, created_at=None, updated_at=None):
        self.category_name = category_name
        self.position = position
        self.created_at = created_at
        self.updated_at = updated_at

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'categoryName': self.category_name,
            'position': self.position,
            'createdAt': self.created_at.isoformat() if hasattr(self.created_at, 'isoformat') else self.created_at,
            'updatedAt': self.updated_at.isoformat() if hasattr(self.updated_at, 'isoformat') else self.updated_at,
        }

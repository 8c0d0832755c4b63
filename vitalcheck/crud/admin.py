from typing import Optional
from sqlalchemy.orm import Session
from vitalcheck.models import Admin


class CRUDAdmin:
    def get(self, db: Session, admin_id: int) -> Optional[Admin]:
        return db.query(Admin).filter(Admin.id == admin_id).first()

    def get_by_email(self, db: Session, email: str) -> Optional[Admin]:
        return db.query(Admin).filter(Admin.email == email).first()

    def create(self, db: Session, *, name: str, email: str, hashed_password: str) -> Admin:
        obj = Admin(name=name, email=email, hashed_password=hashed_password)
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj


admin = CRUDAdmin()

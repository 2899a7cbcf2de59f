from locallibrary.extensions import db


class Genre(db.Model):
    __tablename__ = "genres"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, index=True)

    @property
    def url(self) -> str:
        return f"/catalog/genre/{self.id}"

from locallibrary.extensions import db

STATUSES = ("Available", "Maintenance", "Loaned", "Reserved")


class BookInstance(db.Model):
    __tablename__ = "book_instances"

    id = db.Column(db.Integer, primary_key=True)

    book_id = db.Column(db.Integer, db.ForeignKey("books.id"), nullable=False, index=True)
    imprint = db.Column(db.String(200), nullable=False)
    status = db.Column(db.String(20), nullable=False, default="Maintenance")  # Available/Maintenance/Loaned/Reserved
    due_back = db.Column(db.Date, nullable=True)

    book = db.relationship("Book", backref="instances")

    @property
    def url(self) -> str:
        return f"/catalog/bookinstance/{self.id}"

    @property
    def due_back_formatted(self) -> str:
        if not self.due_back:
            return ""
        d = self.due_back
        return f"{d:%b} {d.day}, {d.year}"

    @property
    def due_back_iso(self) -> str:
        # <input type="date"> value
        return self.due_back.isoformat() if self.due_back else ""

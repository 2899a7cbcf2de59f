from locallibrary.extensions import db

book_genres = db.Table(
    "book_genres",
    db.Column("book_id", db.Integer, db.ForeignKey("books.id"), primary_key=True),
    db.Column("genre_id", db.Integer, db.ForeignKey("genres.id"), primary_key=True),
)


class Book(db.Model):
    __tablename__ = "books"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False, index=True)
    author = db.Column(db.String(200), nullable=True, index=True)
    summary = db.Column(db.Text, nullable=True)
    isbn = db.Column(db.String(32), unique=True, nullable=True, index=True)

    genres = db.relationship("Genre", secondary=book_genres, backref="books")

from leaderboard import db


class Game(db.Model):
    __tablename__ = 'games'
    # Never hand a freed id to a recreated game
    __table_args__ = {'sqlite_autoincrement': True}
    id = db.Column('game_id', db.Integer, primary_key=True)
    # Unique constraint is the final arbiter for concurrent creates
    name = db.Column('game_name', db.Text, unique=True, nullable=False, index=True)
    read_key = db.Column(db.String(64), nullable=False)
    write_key = db.Column(db.String(64), nullable=False)
    admin_key = db.Column(db.String(64), nullable=False)
    scores = db.relationship('Score', back_populates='game', lazy='dynamic', passive_deletes=True)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
        }


class Score(db.Model):
    __tablename__ = 'scores'
    __table_args__ = {'sqlite_autoincrement': True}
    # Surrogate key; gives ties a stable insertion order
    id = db.Column('score_id', db.Integer, primary_key=True)
    game_id = db.Column(db.Integer, db.ForeignKey('games.game_id', ondelete='CASCADE'), nullable=False, index=True)
    score = db.Column(db.Integer, nullable=False)
    extra_info = db.Column(db.Text, nullable=True)
    game = db.relationship('Game', back_populates='scores')

    def to_dict(self):
        return {
            'score': self.score,
            'extra_info': self.extra_info,
        }

from app.model.user import UserModel
from app.model.session import SessionModel
from app.model.video import VideoModel
from app.model.comment import CommentModel
from app.model.tweet import TweetModel
from app.model.playlist import PlaylistModel, PlaylistVideoModel
from app.model.subscription import SubscriptionModel
from app.model.like_dislike import LikeDislikeModel
from app.model.watch_history import WatchHistoryModel

# importing this module registers every table on Base.metadata
ALL_MODELS = [
    UserModel,
    SessionModel,
    VideoModel,
    CommentModel,
    TweetModel,
    PlaylistModel,
    PlaylistVideoModel,
    SubscriptionModel,
    LikeDislikeModel,
    WatchHistoryModel,
]

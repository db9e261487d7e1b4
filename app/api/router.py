from app.api.health import healthcheck
from app.api.user import (register, login, logout, refresh_token, change_password, current,
                          update_account, update_avatar, update_cover_image, channel_profile, watch_history)
from app.api.video import (publish, browse, owner, channel_videos, detail, like_dislike_counts,
                           update, delete, toggle_publish, view, recommendations)
from app.api.like import liked_videos, status, toggle
from app.api.comment import add, update as update_comment, delete as delete_comment, video_comments
from app.api.tweet import create, user_tweets, update as update_tweet, delete as delete_tweet
# my_playlists has to register before detail, otherwise "my-playlists" is taken as a playlist id
from app.api.playlist import (create as create_playlist, add_video, remove_video, user_playlists, my_playlists,
                              detail as playlist_detail, videos, update as update_playlist,
                              delete as delete_playlist)
from app.api.subscription import (status as subscription_status, toggle as toggle_subscription, subscribers,
                                  subscribed_channels, search)
from app.api.dashboard import stats, my_channel_videos, channel_data
from app.api.router_base import (router_user, router_video, router_like, router_comment, router_tweet,
                                 router_playlist, router_subscription, router_dashboard)


def add_router(application):
    application.include_router(healthcheck.router)

    application.include_router(router_user)
    application.include_router(router_video)
    application.include_router(router_like)
    application.include_router(router_comment)
    application.include_router(router_tweet)
    application.include_router(router_playlist)
    application.include_router(router_subscription)
    application.include_router(router_dashboard)

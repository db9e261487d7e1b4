from fastapi import APIRouter

API_PREFIX = "/api/v2"

router_user = APIRouter(
    prefix=f"{API_PREFIX}/users",
    tags=["User"])

router_video = APIRouter(
    prefix=f"{API_PREFIX}/videos",
    tags=["Video"])

router_like = APIRouter(
    prefix=f"{API_PREFIX}/likedislikes",
    tags=["LikeDislike"])

router_comment = APIRouter(
    prefix=f"{API_PREFIX}/comments",
    tags=["Comment"])

router_tweet = APIRouter(
    prefix=f"{API_PREFIX}/tweets",
    tags=["Tweet"])

router_playlist = APIRouter(
    prefix=f"{API_PREFIX}/playlists",
    tags=["Playlist"])

router_subscription = APIRouter(
    prefix=f"{API_PREFIX}/subscriptions",
    tags=["Subscription"])

router_dashboard = APIRouter(
    prefix=f"{API_PREFIX}/dashboards",
    tags=["Dashboard"])

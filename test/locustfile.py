import random
import string
import time
from locust import HttpUser, task, between, SequentialTaskSet

API = "/api/v2"

# 1x1 transparent png, enough for the avatar upload
AVATAR_PNG = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c63000100000500010d0a2db40000000049454e44ae426082"
)


def random_string(length=8):
    letters = string.ascii_lowercase
    return ''.join(random.choice(letters) for i in range(length))


class UserScenario(SequentialTaskSet):

    def on_start(self):
        """
        Register and log in before the scenario.
        When the server answers 500+ wait a little and restart the scenario.
        """
        self.email = f"{random_string()}@example.com"
        self.password = "testpass123"
        self.username = f"user_{random_string(6)}"
        self.tweet_id = None
        self.playlist_id = None

        with self.client.post(f"{API}/users/register", data={
            "email": self.email,
            "username": self.username,
            "fullName": f"Load {self.username}",
            "password": self.password
        }, files={
            "avatar": ("avatar.png", AVATAR_PNG, "image/png")
        }, catch_response=True) as response:
            if response.status_code >= 500:
                print("!! Server Error during Register. Sleeping 10s...")
                time.sleep(10)
                response.failure("Server Error")
                self.interrupt()
                return

        with self.client.post(f"{API}/users/login", json={
            "email": self.email,
            "password": self.password
        }, catch_response=True) as response:
            if response.status_code >= 500:
                print("!! Server Error during Login. Sleeping 10s...")
                time.sleep(10)
                response.failure("Server Error")
                self.interrupt()
                return

    @task
    def browse_dashboard(self):
        self.client.get(f"{API}/health/alive")
        self.client.get(f"{API}/users/current")
        self.client.get(f"{API}/dashboards/channel/stats")
        self.client.get(f"{API}/dashboards/my-channel/videos")

    @task
    def browse_videos(self):
        limit = random.choice([5, 9, 20])
        sort_by = random.choice(["createdAt", "views", "duration", "title"])
        self.client.get(f"{API}/videos?limit={limit}&sortBy={sort_by}", name=f"{API}/videos")

    @task
    def post_and_like_tweet(self):
        response = self.client.post(f"{API}/tweets", json={"content": f"hello {random_string()}"})
        if response.status_code != 201:
            return

        self.tweet_id = response.json()["data"]["id"]
        for reaction in ("like", "dislike", "dislike"):
            self.client.post(
                f"{API}/likedislikes/tweet/{self.tweet_id}/like-toggle",
                json={"type": reaction},
                name=f"{API}/likedislikes/tweet/[id]/like-toggle"
            )

    @task
    def manage_playlist(self):
        response = self.client.post(f"{API}/playlists", json={"name": f"mix {random_string(4)}"})
        if response.status_code == 201:
            self.playlist_id = response.json()["data"]["id"]
        self.client.get(f"{API}/playlists/my-playlists")

    @task
    def cleanup_account(self):
        if self.tweet_id:
            self.client.delete(f"{API}/tweets/{self.tweet_id}", name=f"{API}/tweets/[id]")
        if self.playlist_id:
            self.client.delete(f"{API}/playlists/remove/{self.playlist_id}", name=f"{API}/playlists/remove/[id]")
        self.client.post(f"{API}/users/logout")
        self.interrupt()


class WebsiteUser(HttpUser):
    tasks = [UserScenario]
    wait_time = between(1, 3)

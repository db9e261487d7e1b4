import os
import subprocess

if __name__ == "__main__":
    cmd = [
        "locust",
        "-f", "test/locustfile.py",
        "--host", os.getenv("LOCUST_HOST", "http://localhost:8080"),
        "--loglevel", "INFO"
    ]

    # no stdout/stderr redirection so locust prints straight to the terminal
    process = subprocess.Popen(cmd)

    process.wait()

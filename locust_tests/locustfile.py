"""
BranchLink Load Test: Locust Script
===================================
Simulates branch staff at a busy end-of-day cut-off: dispatchers quoting
prices, branch admins dispatching and receiving manifests.

Usage:
    python manage.py seed_initial_data
    locust -f locust_tests/locustfile.py --host=http://localhost:8000 \
           --users=500 --spawn-rate=50 --run-time=5m --headless

Logs in as the demo staff created by seed_initial_data.
"""

import os
import random
from locust import HttpUser, task, between, events
from locust.exception import StopUser

BRANCH_SLUGS  = ["north-hub", "south-hub", "east-depot", "west-depot"]
DEMO_PASSWORD = os.environ.get("BRANCHLINK_DEMO_PASSWORD", "Demo@1234")


class BranchStaff(HttpUser):
    """Common login and branch discovery for both personas."""
    abstract  = True
    role      = None
    token     = None
    branch_id = None

    def on_start(self):
        email = f"{self.role.lower()}@{random.choice(BRANCH_SLUGS)}.branchlink.test"
        resp = self.client.post(
            "/api/auth/login/",
            json={"email": email, "password": DEMO_PASSWORD},
            name="/api/auth/login/",
        )
        if resp.status_code != 200:
            raise StopUser()
        self.token = resp.json().get("access")
        me = self.client.get("/api/auth/me/", headers=self._headers(), name="/api/auth/me/")
        self.branch_id = me.json().get("branch")

    def _headers(self):
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    def _other_branch_ids(self):
        resp = self.client.get("/api/pricing/zones/", headers=self._headers(), name="/api/pricing/zones/")
        if resp.status_code != 200:
            return []
        ids = []
        for zone in resp.json():
            detail = self.client.get(
                f"/api/pricing/zones/{zone['id']}/",
                headers=self._headers(),
                name="/api/pricing/zones/[id]/",
            )
            ids.extend(b["id"] for b in detail.json().get("branches", []))
        return [b for b in ids if b != self.branch_id]


class Dispatcher(BranchStaff):
    """Counter clerk quoting prices for walk-in customers."""
    wait_time = between(0.5, 2.0)
    role      = "DISPATCHER"
    weight    = 4
    targets   = None

    def on_start(self):
        super().on_start()
        self.targets = self._other_branch_ids()

    # ── Tasks (weighted) ──────────────────────────────────────────────────────

    @task(6)
    def quote_price(self):
        if not self.targets:
            return
        self.client.post(
            "/api/pricing/calculate/",
            json={
                "weight":                str(round(random.uniform(0.1, 99.0), 3)),
                "origin_branch_id":      self.branch_id,
                "destination_branch_id": random.choice(self.targets),
            },
            headers=self._headers(),
            name="/api/pricing/calculate/",
        )

    @task(2)
    def list_incoming(self):
        self.client.get(
            "/api/manifests/?type=incoming",
            headers=self._headers(),
            name="/api/manifests/?type=incoming",
        )

    @task(1)
    def check_notifications(self):
        self.client.get("/api/notifications/", headers=self._headers(), name="/api/notifications/")


class BranchAdmin(BranchStaff):
    """Admin closing the day: ship out what is waiting, receive what arrived."""
    wait_time = between(2, 5)
    role      = "ADMIN"
    weight    = 1

    @task(3)
    def list_manifests(self):
        page = random.randint(1, 3)
        self.client.get(
            f"/api/manifests/?page={page}&limit=20",
            headers=self._headers(),
            name="/api/manifests/",
        )

    @task(2)
    def dispatch_batch(self):
        resp = self.client.get(
            "/api/manifests/available-shipments/",
            headers=self._headers(),
            name="/api/manifests/available-shipments/",
        )
        if resp.status_code != 200 or not resp.json():
            return
        by_destination = {}
        for shipment in resp.json():
            by_destination.setdefault(shipment["destination_branch"], []).append(shipment["id"])
        destination, ids = random.choice(list(by_destination.items()))
        self.client.post(
            "/api/manifests/",
            json={"to_branch_id": destination, "shipment_ids": ids[:10], "vehicle_number": "LOAD-TEST"},
            headers=self._headers(),
            name="/api/manifests/ [dispatch]",
        )

    @task(2)
    def receive_incoming(self):
        resp = self.client.get(
            "/api/manifests/?type=incoming&status=IN_TRANSIT&limit=5",
            headers=self._headers(),
            name="/api/manifests/?type=incoming",
        )
        if resp.status_code != 200:
            return
        for manifest in resp.json().get("data", []):
            # 400 here means another admin got there first.
            with self.client.put(
                f"/api/manifests/{manifest['id']}/receive/",
                headers=self._headers(),
                name="/api/manifests/[id]/receive/",
                catch_response=True,
            ) as receive:
                if receive.status_code in (200, 400):
                    receive.success()

    @task(1)
    def health_check(self):
        self.client.get("/api/health/", name="/api/health/")


# ── Custom events for Locust reporting ────────────────────────────────────────
@events.test_stop.add_listener
def on_test_stop(environment, **kwargs):
    print("\n=== BranchLink Load Test Complete ===")
    stats = environment.stats.total
    print(f"Total requests:      {stats.num_requests}")
    print(f"Failures:            {stats.num_failures}")
    print(f"Avg response time:   {stats.avg_response_time:.0f}ms")
    print(f"95th percentile:     {stats.get_response_time_percentile(0.95):.0f}ms")
    print(f"Requests/sec:        {stats.current_rps:.1f}")
    if stats.num_failures / max(stats.num_requests, 1) > 0.01:
        print("⚠ FAILURE RATE > 1%")
    else:
        print("✓ System stable under load")

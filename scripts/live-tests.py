#!/usr/bin/env python3
# This project was developed with assistance from AI tools.
"""Live test suite for the Mortgage Calculator API.

Validates the REST endpoints, response schemas and error handling
against a running server instance.

Prerequisites:
  - API server running (default http://localhost:8000)

Usage:
  ./scripts/live-tests.py
  ./scripts/live-tests.py --base-url http://localhost:9000
"""

import argparse
import asyncio
import sys

import httpx

HEADERS = {"Origin": "http://localhost:3000"}

# ---------------------------------------------------------------------------
# Test runner
# ---------------------------------------------------------------------------

PASS = 0
FAIL = 0
ERRORS: list[str] = []
SECTION = ""


def section(name: str):
    global SECTION
    SECTION = name
    print(f"\n{'=' * 60}")
    print(f"  {name}")
    print(f"{'=' * 60}\n")


def ok(name: str, passed: bool, detail: str = ""):
    global PASS, FAIL
    if passed:
        PASS += 1
        print(f"  PASS  {name}")
    else:
        FAIL += 1
        msg = f"[{SECTION}] {name}: {detail}" if detail else f"[{SECTION}] {name}"
        ERRORS.append(msg)
        print(f"  FAIL  {name} -- {detail}")


def has_keys(d: dict, *keys: str) -> bool:
    return all(k in d for k in keys)


# ---------------------------------------------------------------------------
# 1. Health
# ---------------------------------------------------------------------------

async def test_health(c: httpx.AsyncClient):
    section("Health")

    r = await c.get("/health/")
    ok("GET /health/ returns 200", r.status_code == 200)
    data = r.json()
    ok("response is a list", isinstance(data, list))
    ok("API status is healthy",
       any(s.get("name") == "API" and s.get("status") == "healthy" for s in data))

    r = await c.get("/")
    ok("GET / root returns 200", r.status_code == 200)
    ok("root has welcome message", "message" in r.json())


# ---------------------------------------------------------------------------
# 2. Calculator
# ---------------------------------------------------------------------------

async def test_calculator(c: httpx.AsyncClient):
    section("Calculator")

    r = await c.get("/api/public/calculator-options")
    ok("GET calculator-options returns 200", r.status_code == 200)
    options = r.json()
    schedules = {s["name"]: s["periods_per_year"] for s in options.get("payment_schedules", [])}
    ok("three payment schedules offered",
       schedules == {"Monthly": 12, "Bi-Weekly": 26, "Accelerated Bi-Weekly": 27},
       str(schedules))

    payload = {
        "propertyPrice": "300000",
        "downPayment": "50000",
        "interestRate": "5",
        "amortizationPeriod": "30",
        "paymentSchedule": "Monthly",
    }
    r = await c.post("/api/public/calculate", json=payload)
    ok("POST calculate returns 200", r.status_code == 200, r.text[:200])
    body = r.json()
    ok("response has payment breakdown",
       has_keys(body, "periodic_payment", "total_mortgage_amount", "needs_insurance",
                "insurance_rate", "insurance_premium", "total_number_of_payments"))
    ok("insurance required below 20% down", body.get("needs_insurance") is True)
    ok("premium added to financed amount",
       abs(body.get("total_mortgage_amount", 0) - 257000) < 0.01,
       str(body.get("total_mortgage_amount")))
    ok("360 monthly payments", body.get("total_number_of_payments") == 360)

    r = await c.post("/api/public/calculate", json={**payload, "downPayment": "60000"})
    ok("20% down returns 200", r.status_code == 200)
    ok("no insurance at exactly 20%", r.json().get("insurance_premium") == 0)


# ---------------------------------------------------------------------------
# 3. Error handling
# ---------------------------------------------------------------------------

async def test_error_handling(c: httpx.AsyncClient):
    section("Error handling")

    r = await c.post("/api/public/calculate", json={})
    ok("empty body returns 400", r.status_code == 400)
    body = r.json()
    ok("RFC 7807 fields present", has_keys(body, "type", "title", "status", "detail"))
    ok("every field reported", len(body.get("errors", {})) == 5, str(body.get("errors")))

    r = await c.post("/api/public/calculate", json={
        "propertyPrice": "100000",
        "downPayment": "150000",
        "interestRate": "5",
        "amortizationPeriod": "25",
        "paymentSchedule": "Monthly",
    })
    ok("deposit above price returns 400", r.status_code == 400)
    ok("exceeds-price message",
       "exceed" in r.json().get("errors", {}).get("downPaymentError", ""))

    r = await c.post("/api/public/calculate", json={
        "propertyPrice": "100000",
        "downPayment": "10000",
        "interestRate": "5",
        "amortizationPeriod": "25",
        "paymentSchedule": "Weekly",
    })
    ok("unknown schedule returns 500", r.status_code == 500)
    ok("detail names the schedule", "Weekly" in r.json().get("detail", ""))

    r = await c.get("/api/public/nonexistent")
    ok("unknown route returns 404", r.status_code == 404)


async def test_openapi(c: httpx.AsyncClient):
    section("OpenAPI")

    r = await c.get("/openapi.json")
    ok("GET /openapi.json returns 200", r.status_code == 200)
    paths = r.json().get("paths", {})
    ok("calculate endpoint documented", "/api/public/calculate" in paths)


async def main():
    parser = argparse.ArgumentParser(description="Live test suite for the Mortgage Calculator API")
    parser.add_argument("--base-url", default="http://localhost:8000",
                        help="Base URL of the running API server")
    args = parser.parse_args()

    print("=" * 60)
    print("  LIVE TEST SUITE -- Mortgage Calculator API")
    print("=" * 60)

    async with httpx.AsyncClient(base_url=args.base_url, headers=HEADERS, timeout=15) as c:

        # Pre-flight: make sure server is up
        try:
            r = await c.get("/health/")
            if r.status_code != 200:
                print(f"\n  Server returned {r.status_code} on /health/ -- is it running?")
                sys.exit(2)
        except httpx.ConnectError:
            print(f"\n  Cannot connect to server at {args.base_url} -- is it running?")
            sys.exit(2)

        await test_health(c)
        await test_calculator(c)
        await test_error_handling(c)
        await test_openapi(c)

    # Summary
    print(f"\n{'=' * 60}")
    print(f"  RESULTS: {PASS} passed, {FAIL} failed")
    print(f"{'=' * 60}")

    if ERRORS:
        print("\nFailures:")
        for e in ERRORS:
            print(f"  - {e}")

    sys.exit(0 if FAIL == 0 else 1)


if __name__ == "__main__":
    asyncio.run(main())

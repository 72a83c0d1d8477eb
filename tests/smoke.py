import sys
import requests

# Kézi füstteszt egy futó szerver ellen: python tests/smoke.py [base_url]
base = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:3000"
s = requests.Session()

r = s.get(f"{base}/health", timeout=10)
print("health", r.status_code, r.text)

r = s.post(f"{base}/register", timeout=10,
           json={"name": "Smoke", "employeeId": "SMOKE1", "phoneNumber": "000",
                 "password": "smoke", "role": "employee"})
print("register", r.status_code, r.text)

r = s.post(f"{base}/login", json={"employeeId": "SMOKE1", "password": "smoke"}, timeout=10)
print("login", r.status_code, r.text)

r = s.get(f"{base}/api/check-auth", timeout=10)
print("check-auth", r.status_code, r.text)

for page in ("emp_dashboard.html", "hr_dashboard.html"):
    r = s.get(f"{base}/{page}", allow_redirects=False, timeout=10)
    print(page, r.status_code, "redirect:", r.headers.get("Location"))

r = s.post(f"{base}/logout", timeout=10)
print("logout", r.status_code, r.text)

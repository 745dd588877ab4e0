# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Browser client.
Serves a single self-contained page that renders the weekly summary and
adds or deletes team members through the REST API.
"""

from fastapi import APIRouter
from starlette.responses import HTMLResponse

router = APIRouter(tags=["Client"])

INDEX_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Team Work Schedule</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background: #f8fafc;
            color: #0f172a;
        }
        .container { max-width: 1100px; margin: 2rem auto; padding: 0 1rem; }
        h1 { font-size: 2.25rem; margin-bottom: 1.5rem; }
        .toolbar { margin-bottom: 1.5rem; }
        button {
            font: inherit;
            padding: 0.5rem 1rem;
            border-radius: 0.375rem;
            border: 1px solid #2563eb;
            cursor: pointer;
        }
        .primary { background: #2563eb; color: #fff; margin-right: 0.75rem; }
        .outlined { background: #fff; color: #2563eb; }
        .danger { background: none; border-color: transparent; color: #dc2626; }
        table {
            width: 100%;
            border-collapse: collapse;
            background: #fff;
            box-shadow: 0 1px 3px rgba(0, 0, 0, 0.12);
        }
        th, td { padding: 0.75rem; border-bottom: 1px solid #e2e8f0; text-align: right; }
        th:first-child, td:first-child, th:nth-child(2), td:nth-child(2) { text-align: left; }
        tfoot td { font-weight: 700; }
        .error { color: #dc2626; margin-bottom: 1rem; min-height: 1.25rem; }
        dialog { border: none; border-radius: 0.5rem; padding: 1.5rem; min-width: 22rem; }
        dialog::backdrop { background: rgba(15, 23, 42, 0.4); }
        dialog h2 { margin-bottom: 1rem; }
        dialog input {
            display: block;
            width: 100%;
            font: inherit;
            padding: 0.5rem;
            margin-bottom: 0.75rem;
            border: 1px solid #cbd5e1;
            border-radius: 0.375rem;
        }
        .actions { text-align: right; }
    </style>
</head>
<body>
    <div class="container">
        <h1>Team Work Schedule</h1>
        <div class="toolbar">
            <button class="primary" id="open-dialog">Add Team Member</button>
            <button class="outlined" id="refresh">Refresh Data</button>
        </div>
        <div class="error" id="error"></div>
        <table>
            <thead>
                <tr>
                    <th>Name</th><th>Role</th>
                    <th>Monday</th><th>Tuesday</th><th>Wednesday</th><th>Thursday</th>
                    <th>Friday</th><th>Saturday</th><th>Sunday</th>
                    <th>Total Hours</th><th>Actions</th>
                </tr>
            </thead>
            <tbody id="rows"></tbody>
            <tfoot>
                <tr><td colspan="9">Grand Total</td><td id="grand-total">0</td><td></td></tr>
            </tfoot>
        </table>
    </div>

    <dialog id="add-dialog">
        <h2>Add New Team Member</h2>
        <input id="new-name" placeholder="Name" autofocus>
        <input id="new-email" placeholder="Email (optional)">
        <input id="new-role" placeholder="Role (optional)">
        <div class="actions">
            <button class="outlined" id="cancel">Cancel</button>
            <button class="primary" id="add">Add</button>
        </div>
    </dialog>

    <script>
        const DAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"];
        const dialog = document.getElementById("add-dialog");
        const errorBox = document.getElementById("error");

        function cell(text) {
            const td = document.createElement("td");
            td.textContent = text;
            return td;
        }

        async function call(method, url, body) {
            const response = await fetch(url, {
                method: method,
                headers: { "Content-Type": "application/json" },
                body: body ? JSON.stringify(body) : undefined,
            });
            const data = await response.json();
            if (!response.ok) {
                throw new Error(data.error || response.statusText);
            }
            return data;
        }

        async function refresh() {
            try {
                const summary = await call("GET", "/api/weekly-summary");
                const rows = document.getElementById("rows");
                rows.replaceChildren();
                for (const user of summary.users) {
                    const tr = document.createElement("tr");
                    tr.appendChild(cell(user.userName));
                    tr.appendChild(cell(user.userRole));
                    for (const day of DAYS) {
                        tr.appendChild(cell(user.hours[day]));
                    }
                    const total = cell("");
                    const strong = document.createElement("strong");
                    strong.textContent = user.totalHours;
                    total.appendChild(strong);
                    tr.appendChild(total);
                    const actions = cell("");
                    const remove = document.createElement("button");
                    remove.className = "danger";
                    remove.textContent = "Delete";
                    remove.onclick = () => deleteUser(user.userId);
                    actions.appendChild(remove);
                    tr.appendChild(actions);
                    rows.appendChild(tr);
                }
                document.getElementById("grand-total").textContent = summary.grandTotal;
                errorBox.textContent = "";
            } catch (err) {
                errorBox.textContent = "Error fetching weekly summary: " + err.message;
            }
        }

        async function addUser() {
            const name = document.getElementById("new-name").value;
            if (!name.trim()) return;
            try {
                await call("POST", "/api/users", {
                    name: name,
                    email: document.getElementById("new-email").value,
                    role: document.getElementById("new-role").value,
                });
                for (const id of ["new-name", "new-email", "new-role"]) {
                    document.getElementById(id).value = "";
                }
                dialog.close();
                await refresh();
            } catch (err) {
                errorBox.textContent = "Error adding user: " + err.message;
            }
        }

        async function deleteUser(userId) {
            try {
                await call("DELETE", "/api/users/" + userId);
                await refresh();
            } catch (err) {
                errorBox.textContent = "Error deleting user: " + err.message;
            }
        }

        document.getElementById("open-dialog").onclick = () => dialog.showModal();
        document.getElementById("cancel").onclick = () => dialog.close();
        document.getElementById("add").onclick = addUser;
        document.getElementById("refresh").onclick = refresh;
        refresh();
    </script>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index():
    return INDEX_HTML

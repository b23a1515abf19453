"""디렉터리 HTML 페이지: 어드보킷 검색 UI.

Directory HTML page: Serves the browser UI for searching advocates.
The page calls GET /api/advocates; keystrokes are debounced and a newer
request aborts the one still in flight.
"""

import html

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from app.config import settings

router: APIRouter = APIRouter()

# 검색 디바운스 지연(ms): Debounce delay before a search request is sent
SEARCH_DEBOUNCE_MS: int = 500

DIRECTORY_HTML = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{TITLE}}</title>
<style>
body{font-family:system-ui,sans-serif;margin:24px;color:#222}
input{border:1px solid #000;padding:4px 6px;margin-right:8px}
button{padding:6px 14px;border:1px solid #ccc;border-radius:4px;background:#fff;cursor:pointer}
button:disabled{opacity:.5;cursor:default}
.error{color:red;margin-bottom:16px}
.pager{display:flex;align-items:center;gap:12px;margin:16px 0}
table{width:100%;border-collapse:collapse;border:1px solid #ccc}
th,td{border:1px solid #ccc;padding:8px 16px;text-align:left;vertical-align:top}
thead tr{background:#f3f4f6}
tbody tr:hover{background:#f9fafb}
</style>
</head>
<body>
<main>
<h1>{{TITLE}}</h1>
<div id="error" class="error" hidden></div>
<div>
<p>Search</p>
<p>Searching for: <span id="term"></span><span id="loading" hidden> (Loading...)</span></p>
<input id="search" autocomplete="off">
<button id="reset">Reset Search</button>
</div>
<div class="pager">
<button id="prev">Previous</button>
<span id="status"></span>
<button id="next">Next</button>
</div>
<table>
<thead>
<tr><th>First Name</th><th>Last Name</th><th>City</th><th>Degree</th><th>Specialties</th><th>Years of Experience</th><th>Phone Number</th></tr>
</thead>
<tbody id="rows"></tbody>
</table>
</main>
<script>
(function () {
  const PAGE_SIZE = {{PAGE_SIZE}};
  const DEBOUNCE_MS = {{DEBOUNCE_MS}};
  const state = {term: "", search: "", page: 1, totalPages: 0, total: 0, loading: false};
  let controller = null;
  let timer = null;
  const $ = (id) => document.getElementById(id);

  function escapeHtml(value) {
    return String(value ?? "").replace(/[&<>"']/g, (c) => ({
      "&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&#39;"
    })[c]);
  }

  function render() {
    $("term").textContent = state.term;
    $("loading").hidden = !state.loading;
    $("status").textContent =
      "Page " + state.page + " of " + state.totalPages + " (" + state.total + " total results)";
    $("prev").disabled = state.loading || state.page <= 1;
    $("next").disabled = state.loading || state.page >= state.totalPages;
    $("reset").disabled = state.loading;
  }

  function showError(message) {
    const box = $("error");
    box.hidden = !message;
    box.textContent = message ? "Error: " + message : "";
  }

  function renderRows(advocates) {
    $("rows").innerHTML = advocates.map((a) =>
      "<tr>" +
      "<td>" + escapeHtml(a.first_name) + "</td>" +
      "<td>" + escapeHtml(a.last_name) + "</td>" +
      "<td>" + escapeHtml(a.city) + "</td>" +
      "<td>" + escapeHtml(a.degree) + "</td>" +
      "<td>" + (a.specialties || []).map((s) => "<div>" + escapeHtml(s) + "</div>").join("") + "</td>" +
      "<td>" + escapeHtml(a.years_of_experience) + "</td>" +
      "<td>" + escapeHtml(a.phone_number) + "</td>" +
      "</tr>"
    ).join("");
  }

  async function fetchAdvocates() {
    // 이전 요청 취소: Abort the request still in flight
    if (controller) controller.abort();
    const current = new AbortController();
    controller = current;

    const params = new URLSearchParams({page: String(state.page), limit: String(PAGE_SIZE)});
    if (state.search) params.set("search", state.search);

    state.loading = true;
    showError(null);
    render();
    try {
      const response = await fetch("/api/advocates?" + params, {signal: current.signal});
      if (!response.ok) {
        throw new Error("Failed to fetch advocates: " + response.statusText);
      }
      const body = await response.json();
      state.totalPages = body.total_pages;
      state.total = body.total;
      renderRows(body.data);
    } catch (err) {
      if (err.name === "AbortError") return;
      showError(err.message || "Failed to load advocates");
      console.error("Error fetching advocates:", err);
    } finally {
      if (controller === current) {
        controller = null;
        state.loading = false;
        render();
      }
    }
  }

  function setSearch(value) {
    state.term = value;
    render();
    clearTimeout(timer);
    timer = setTimeout(() => {
      if (state.search === state.term) return;
      state.search = state.term;
      state.page = 1;
      fetchAdvocates();
    }, DEBOUNCE_MS);
  }

  $("search").addEventListener("input", (e) => setSearch(e.target.value));
  $("reset").addEventListener("click", () => {
    clearTimeout(timer);
    $("search").value = "";
    state.term = "";
    state.search = "";
    state.page = 1;
    fetchAdvocates();
  });
  $("prev").addEventListener("click", () => {
    state.page = Math.max(1, state.page - 1);
    fetchAdvocates();
  });
  $("next").addEventListener("click", () => {
    state.page = Math.min(Math.max(state.totalPages, 1), state.page + 1);
    fetchAdvocates();
  });

  fetchAdvocates();
})();
</script>
</body>
</html>"""


def _render(title: str) -> HTMLResponse:
    body: str = (
        DIRECTORY_HTML.replace("{{TITLE}}", html.escape(title))
        .replace("{{PAGE_SIZE}}", str(settings.DEFAULT_PAGE_SIZE))
        .replace("{{DEBOUNCE_MS}}", str(SEARCH_DEBOUNCE_MS))
    )
    return HTMLResponse(body)


@router.get("/", response_class=HTMLResponse)
async def directory_page() -> HTMLResponse:
    """어드보킷 디렉터리 페이지를 반환합니다."""
    return _render("Solace Advocates")

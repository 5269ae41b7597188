def test_form_includes_checker_by_default(client):
    response = client.get("/v1/display/form")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    html = response.text
    assert 'id="membership-registration-form"' in html
    assert 'data-action="/v1/membership/register"' in html
    assert 'pattern="[0-9]{7,8}"' in html
    assert 'id="membership-check-form"' in html


def test_form_without_checker(client):
    html = client.get("/v1/display/form", params={"show_checker": "no"}).text

    assert 'id="membership-registration-form"' in html
    assert 'id="membership-check-form"' not in html


def test_checker(client):
    html = client.get("/v1/display/checker").text

    assert 'id="membership-check-form"' in html
    assert 'data-action="/v1/membership/check"' in html
    assert 'id="membership-registration-form"' not in html


def test_members_list_empty(client):
    html = client.get("/v1/display/members").text

    assert "No members found." in html


def test_members_list_hides_contact_columns_by_default(client, member_service, member_data):
    member_service.register(**member_data)

    html = client.get("/v1/display/members").text

    assert "NVP-000001" in html
    assert "Jane Wanjiku" in html
    assert "Mar 5, 2025" in html
    assert "jane@example.com" not in html
    assert "1234567" not in html


def test_members_list_optional_columns(client, member_service, member_data):
    member_service.register(**member_data)

    html = client.get(
        "/v1/display/members",
        params={"show_email": "yes", "show_phone": "yes", "show_id": "yes"},
    ).text

    assert "<th>Email</th>" in html
    assert "jane@example.com" in html
    assert "+254712345678" in html
    assert "<td>1234567</td>" in html


def test_members_list_escapes_names(client, member_service, member_data):
    member_service.register(**{**member_data, "full_name": "<script>alert(1)</script>"})

    html = client.get("/v1/display/members").text

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html


def test_members_list_limit(client, member_service, make_member_data):
    for n in range(1, 6):
        member_service.register(**make_member_data(n))

    html = client.get("/v1/display/members", params={"limit": 2}).text

    assert html.count("<tr>") == 3  # header + two rows


def test_stats(client, member_service, make_member_data):
    for n in range(1, 3):
        member_service.register(**make_member_data(n))

    html = client.get("/v1/display/stats", params={"show_today": "no"}).text

    assert "Total Members" in html
    assert "This Month" in html
    assert "This Year" in html
    assert "Today" not in html
    assert "<h3>2</h3>" in html

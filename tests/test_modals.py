from frontend.dashboard.modals import NewDocumentModal, NewOrganizationModal, NewProjectModal


def _calls():
    calls = []
    return calls, lambda *args: calls.append(args)


def test_organization_name_is_trimmed():
    calls, on_create = _calls()
    modal = NewOrganizationModal(on_close=lambda: None, on_create=on_create)
    assert modal.submit("  Acme  ")
    assert calls == [("Acme",)]


def test_blank_names_never_submit():
    calls, on_create = _calls()
    modals = [
        NewOrganizationModal(on_close=lambda: None, on_create=on_create),
        NewProjectModal(on_close=lambda: None, on_create=on_create),
        NewDocumentModal(on_close=lambda: None, on_create=on_create),
    ]
    for modal in modals:
        assert modal.submit("   ") is False
        assert modal.submit("") is False
    assert calls == []


def test_project_passes_description():
    calls, on_create = _calls()
    modal = NewProjectModal(on_close=lambda: None, on_create=on_create)
    assert modal.submit(" Site ", " v1 ")
    assert calls == [("Site", "v1")]


def test_document_encrypt_needs_key():
    calls, on_create = _calls()
    NewDocumentModal(on_close=lambda: None, on_create=on_create).submit("Notes", "body", encrypt=True)
    NewDocumentModal(on_close=lambda: None, on_create=on_create, can_encrypt=True).submit("Notes", "body", encrypt=True)
    assert calls == [("Notes", "body", False), ("Notes", "body", True)]


def test_close_calls_parent():
    closed = []
    modal = NewOrganizationModal(on_close=lambda: closed.append(True), on_create=lambda name: None)
    modal.close()
    assert closed == [True]


def test_document_form_starts_unencrypted():
    from streamlit.testing.v1 import AppTest

    def document_form():
        from frontend.dashboard.modals import NewDocumentModal

        NewDocumentModal(on_close=lambda: None, on_create=lambda *args: None, can_encrypt=True).render()

    at = AppTest.from_function(document_form).run()
    encrypt = at.checkbox(key="new_document_encrypt")
    assert encrypt.value is False
    assert not encrypt.disabled

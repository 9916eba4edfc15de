import logging
import streamlit as st
import streamlit.components.v1 as components
from core.config import load_config, variant_choices
from core.docx_report import DOCX_MIME
from core.export import ExportEncodingError, ExportRenderer
from core.preview import CARD_CSS, PreviewRenderer
from core.registry import load_catalog
from core.store import InstanceStore
from core.utils import status_box

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("source_builder")

st.set_page_config(page_title="Source Builder", layout="wide")

# 1) Pick the app variant; a new variant starts a fresh session
variants, initial = variant_choices()
variant_paths = list(variants)
variant = st.sidebar.selectbox("Variant", variant_paths, index=variant_paths.index(initial), format_func=lambda p: variants[p])

if st.session_state.get("variant") != variant:
    cfg = load_config(variant)
    catalog = load_catalog(cfg)
    for k in [k for k in st.session_state if str(k).startswith(("hdr-", "data-"))]:
        del st.session_state[k]
    st.session_state.variant = variant
    st.session_state.cfg = cfg
    st.session_state.store = InstanceStore(catalog)
    st.session_state.fields = {k: "" for k in cfg.header_keys}
    logger.info("Session started for variant %s", variants[variant])

cfg = st.session_state.cfg
store: InstanceStore = st.session_state.store
fields = st.session_state.fields
preview = PreviewRenderer(cfg, store.catalog)
exporter = ExportRenderer(cfg, store.catalog)

st.title(cfg.name)
st.markdown(CARD_CSS, unsafe_allow_html=True)

left, right = st.columns(2)

# 2) Header fields + module library
with left:
    st.subheader("Create Source")
    st.caption("Fill header fields, add modules (use Repeat for triplicate BPs/ECGs), then export or print. Everything runs locally.")
    c1, c2 = st.columns(2)
    for i, h in enumerate(cfg.header):
        with (c1 if i % 2 == 0 else c2):
            label = f"{h.label} (DD-MMM-YYYY)" if h.kind == "date" else h.label
            fields[h.key] = st.text_input(label, value=fields.get(h.key, ""), placeholder=h.placeholder, key=f"hdr-{h.key}")

    err = exporter.validate(fields)
    if err:
        st.error(err)

    with st.container(border=True):
        options = dict(store.catalog.options())
        to_add = st.selectbox("Add module", list(options), format_func=lambda t: options[t])
        st.button("Add", on_click=store.add, args=(to_add,), type="primary")
        st.caption("Tip: for triplicate BP or multiple ECGs, increase Repeat.")

# 3) Live preview
with right:
    st.markdown(preview.header_html(fields), unsafe_allow_html=True)
    if not len(store):
        st.markdown(preview.empty_html(), unsafe_allow_html=True)
    for inst in store:
        entry = store.catalog.get(inst.tag)
        with st.expander(inst.title, expanded=True):
            b1, b2, b3, b4 = st.columns([1, 1, 1, 3])
            if entry.repeatable:
                b1.button("−", key=f"dec-{inst.id}", on_click=store.set_repeat, args=(inst.id, -1))
                b2.markdown(f"**{inst.repeat_count}×**")
                b3.button("+", key=f"inc-{inst.id}", on_click=store.set_repeat, args=(inst.id, 1))
            b4.button("Remove", key=f"rm-{inst.id}", on_click=store.remove, args=(inst.id,))
            for key, label in entry.fields:
                value = st.text_input(label, value=inst.data.get(key, ""), key=f"data-{inst.id}-{key}")
                store.set_data(inst.id, key, value)
            st.markdown(preview.module_body_html(inst), unsafe_allow_html=True)

# 4) Export: all-or-nothing, blocked while a date is invalid
with left:
    d1, d2 = st.columns(2)
    docx_bytes = pdf_bytes = None
    failure = None
    if not err:
        try:
            docx_bytes = exporter.to_docx(fields, store.instances)
            pdf_bytes = exporter.to_pdf(fields, store.instances)
        except ExportEncodingError as exc:
            docx_bytes = pdf_bytes = None
            failure = str(exc)
    status_box(len(store), invalid=err, failure=failure)
    with d1:
        st.download_button(
            "Download .docx",
            data=docx_bytes or b"",
            file_name=exporter.filename(fields, "docx"),
            mime=DOCX_MIME,
            disabled=docx_bytes is None,
        )
    with d2:
        st.download_button(
            "Download .pdf",
            data=pdf_bytes or b"",
            file_name=exporter.filename(fields, "pdf"),
            mime="application/pdf",
            disabled=pdf_bytes is None,
        )

    with st.expander("Print / Save as PDF"):
        components.html(preview.print_html(fields, store.instances), height=80)

st.caption(f"© {cfg.brand} · {cfg.footer}")

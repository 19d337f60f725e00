import streamlit as st

from abc_logistics.data.models import DeveloperProfile
from abc_logistics.developer_config import DEVELOPER_CONFIG

st.set_page_config(page_title="About", layout="centered")

profile = DeveloperProfile.from_raw(DEVELOPER_CONFIG)

# -----------------------------------------------------------------------------
# Profile card
# -----------------------------------------------------------------------------
avatar, info = st.columns([1, 3])
with avatar:
    if profile.avatar_url:
        st.image(profile.avatar_url, caption=profile.name)
    else:
        st.markdown(f"<div style='font-size:48px;font-weight:700;text-align:center'>{profile.initials}</div>", unsafe_allow_html=True)
with info:
    st.title(profile.name)
    if profile.title:
        st.subheader(profile.title)
    if profile.bio:
        st.write(profile.bio)

# -----------------------------------------------------------------------------
# Contact links
# -----------------------------------------------------------------------------
links = []
if profile.email:
    links.append(f"[{profile.email}](mailto:{profile.email})")
if profile.phone:
    links.append(f"[{profile.phone}](tel:{profile.phone})")
if profile.github:
    links.append(f"[GitHub]({profile.github})")
if profile.linkedin:
    links.append(f"[LinkedIn]({profile.linkedin})")
if links:
    st.markdown(" · ".join(links))

if profile.skills:
    st.markdown("### Skills")
    st.markdown(" ".join(f"`{skill}`" for skill in profile.skills))

if profile.projects:
    st.markdown("### Projects")
    for project in profile.projects:
        title = f"[{project.name}]({project.url})" if project.url else project.name
        st.markdown(f"**{title}**  \n{project.description}")

if profile.experience:
    st.markdown("### Experience")
    for job in profile.experience:
        period = f" · {job.period}" if job.period else ""
        st.markdown(f"**{job.role}**, {job.company}{period}  \n{job.description}")

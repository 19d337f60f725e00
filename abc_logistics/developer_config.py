"""Profile shown on the About page.

Edit the values below to personalise the page. Leave a string empty to hide
it, and leave skills / projects / experience empty to hide those sections.
"""

DEVELOPER_CONFIG = {
    # Profile
    "name": "Matthew Cheng",
    "title": "Software Developer",
    "bio": (
        "I am a passionate software developer with experience in building scalable web applications. "
        "I enjoy working with JavaScript and exploring new technologies. In my free time, I contribute "
        "to open-source projects and write technical blogs."
    ),
    # Shown instead of the initials avatar when set
    "avatar_url": "",

    # Contact
    "email": "wkc10@sfu.ca",
    "phone": "123456789",
    "github": "https://github.com/polarbaejr",
    "linkedin": "https://www.linkedin.com/in/matthew-cheng-79b38229/",

    "skills": [
        "JavaScript", "HTML & CSS", "SQL", "Node.js", "React", "Git",
        "Agile Methodologies", "Problem Solving", "Communication", "Teamwork",
    ],
    # Each: name, description, url (optional)
    "projects": [
        {
            "name": "Accounting Dashboard",
            "description": "A web application for managing and visualizing financial data, built with React and Node.js.",
            "url": "https://github.com/polarbaejr/Accounting_Dashboard",
        },
        {
            "name": "Taq-Event-Bot",
            "description": "A discord bot that manages announcements, applications, and events for the Taq-Event Discord server, built with Node.js and Discord.js.",
            "url": "https://github.com/polarbaejr/Taq-Event-Bot",
        },
    ],
    # Each: role, company, period (optional), description (optional)
    "experience": [
        {
            "role": "Software Developer",
            "company": "ABC Logistics",
            "period": "2023 – Present",
            "description": "Developed and maintained web applications using JavaScript, React, and Node.js.",
        },
        {
            "role": "Junior Developer Intern",
            "company": "XYZ Technologies",
            "period": "Summer 2022",
            "description": "Assisted in building and testing web applications for internal clients.",
        },
    ],
}
